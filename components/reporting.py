import numpy as np
import pandas as pd


COLUMNS = ["term", "pages", "page_count"]


def terms_to_frame(terms):
    """Tabular view of `terms`, one row per term, in the given order."""
    rows = [
        {
            "term": t.name,
            "pages": ", ".join(str(p) for p in t.sorted_pages()),
            "page_count": t.page_count,
        }
        for t in terms
    ]
    return pd.DataFrame(rows, columns=COLUMNS)


def page_count_summary(terms):
    """Aggregate page statistics; all zeros for an empty index."""
    counts = np.array([t.page_count for t in terms], dtype=np.int64)
    if counts.size == 0:
        return {"terms": 0, "total_pages": 0, "mean_pages": 0.0, "max_pages": 0}
    return {
        "terms": int(counts.size),
        "total_pages": int(counts.sum()),
        "mean_pages": float(counts.mean()),
        "max_pages": int(counts.max()),
    }

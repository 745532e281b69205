"""
Line-based persistence for a `TermDirectory`.

File format: one term per line, ``<name>: <page>[, <page>]*``. Loading is
best-effort: bad page tokens are skipped with a warning, and lines left with no
valid page are dropped. Saving writes terms in ascending name order with pages
sorted ascending.
"""
import os
import sys
from dataclasses import dataclass


@dataclass
class StorageConfig:
    """
    Configuration for load/save
        data_dir: str, directory that relative load paths resolve against
        save_dir: str, directory that relative save paths resolve against
        encoding: str, text encoding of index files
    """
    data_dir: str = "data"
    save_dir: str = "Saves"
    encoding: str = "utf-8"

    def __post_init__(self):
        if not self.data_dir or not self.save_dir:
            raise ValueError("data_dir and save_dir must be non-empty")


def _warn(msg):
    print(f"[WARN] {msg}", file=sys.stderr)


def _error(msg):
    print(f"[ERROR] {msg}", file=sys.stderr)


def parse_line(line):
    """Parse one index line.

    Returns
    -------
    tuple[str, list[int]] | None
        `(name, pages)` or None when the line is blank, malformed, or has no
        valid page.
    """
    line = line.strip()
    if not line:
        return None

    name, sep, page_part = line.partition(":")
    if not sep:
        _warn(f"Line without ':' skipped: {line!r}")
        return None
    name = name.strip()
    if not name:
        _warn(f"Line without a term name skipped: {line!r}")
        return None

    pages = []
    for token in page_part.split(","):
        token = token.strip()
        if not token:
            continue
        try:
            page = int(token)
        except ValueError:
            _warn(f"Invalid page ignored: {token!r}")
            continue
        if page <= 0:
            _warn(f"Non-positive page ignored: {token!r}")
            continue
        pages.append(page)

    if not pages:
        return None
    return name, pages


def load_lines(lines, directory):
    """Feed parsed `lines` into `directory`; return how many lines were applied."""
    applied = 0
    for line in lines:
        parsed = parse_line(line)
        if parsed is None:
            continue
        name, pages = parsed
        directory.add_term(name, pages)
        applied += 1
    return applied


def dump_lines(directory):
    return [term.format_line() for term in directory.get_all_terms()]


def _resolve(filename, base_dir):
    if os.path.isabs(filename) or os.path.dirname(filename):
        return filename
    return os.path.join(base_dir, filename)


def load_from_file(filename, directory, config=None):
    """Load an index file into `directory`. Returns False on I/O failure."""
    config = config or StorageConfig()
    path = _resolve(filename, config.data_dir)
    try:
        with open(path, "r", encoding=config.encoding) as f:
            applied = load_lines(f, directory)
    except FileNotFoundError:
        _error(f"File {path} not found.")
        return False
    except (OSError, UnicodeDecodeError) as e:
        _error(f"Could not read {path}: {e}")
        return False
    print(f"[INFO] Loaded {applied} lines from {os.path.abspath(path)}")
    return True


def save_to_file(filename, directory, config=None):
    """Write `directory` to an index file. Returns False on I/O failure."""
    config = config or StorageConfig()
    path = _resolve(filename, config.save_dir)
    try:
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(path, "w", encoding=config.encoding) as f:
            for line in dump_lines(directory):
                f.write(line + "\n")
    except OSError as e:
        _error(f"Could not write {path}: {e}")
        return False
    print(f"[INFO] Index saved to {os.path.abspath(path)}")
    return True

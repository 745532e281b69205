import streamlit as st
import plotly.express as px

from components.persistence import StorageConfig, dump_lines, load_lines, save_to_file
from components.reporting import page_count_summary, terms_to_frame
from components.term_directory import TermDirectory
from components.workload import WorkLoad

# Configure page
st.set_page_config(
    page_title="Term Index",
    page_icon="📖",
    layout="wide",
    initial_sidebar_state="expanded"
)

if "directory" not in st.session_state:
    st.session_state["directory"] = TermDirectory()
directory = st.session_state["directory"]

# Main title
st.title("📖 Term Index")
st.markdown("---")

# Sidebar
with st.sidebar:
    st.header("Menu")
    page = st.selectbox(
        "Choose an action:",
        [
            "Load from file",
            "Add term",
            "Remove term",
            "Remove page",
            "Rename term",
            "Prefix search",
            "Most frequent term",
            "Full index",
            "Save to file",
            "Sample data",
        ]
    )

    st.markdown("---")
    st.metric("Terms", len(directory))
    if st.button("🗑️ Clear index"):
        directory.clear()
        st.rerun()

# Main content area
if page == "Load from file":
    st.header("📁 Load from file")
    st.markdown("One term per line: `name: page, page, ...`")

    uploaded_file = st.file_uploader("Choose a TXT file", type=["txt"])
    if uploaded_file is not None:
        try:
            text = uploaded_file.getvalue().decode("utf-8")
        except UnicodeDecodeError as e:
            st.error(f"❌ Could not read file: {e}")
        else:
            applied = load_lines(text.splitlines(), directory)
            st.success(f"✅ Loaded {applied} lines. The index now holds {len(directory)} terms.")

elif page == "Add term":
    st.header("➕ Add term")
    name = st.text_input("Term")
    pages_text = st.text_input("Pages (comma separated)")
    if st.button("Add"):
        try:
            pages = [int(p) for p in pages_text.split(",") if p.strip()]
            term = directory.add_term(name, pages)
        except ValueError as e:
            st.error(f"❌ {e}")
        else:
            st.success(f"✅ {term}")

elif page == "Remove term":
    st.header("➖ Remove term")
    if directory.is_empty():
        st.info("The index is empty.")
    else:
        name = st.text_input("Term to remove")
        if st.button("Remove"):
            if directory.remove_term(name):
                st.success("✅ Term removed.")
            else:
                st.error("❌ Term not found.")

elif page == "Remove page":
    st.header("✂️ Remove page from term")
    if directory.is_empty():
        st.info("The index is empty.")
    else:
        name = st.text_input("Term")
        term = directory.get_term(name) if name.strip() else None
        if name.strip() and term is None:
            st.error(f"❌ The term \"{name}\" does not exist.")
        elif term is not None:
            page_no = st.selectbox("Page to remove", term.sorted_pages())
            if st.button("Remove page"):
                directory.remove_page_from_term(page_no, name)
                if directory.get_term(name) is None:
                    st.success("✅ Page removed. The term had no pages left and was removed.")
                else:
                    st.success("✅ Page removed.")

elif page == "Rename term":
    st.header("✏️ Rename term")
    old_name = st.text_input("Current name")
    new_name = st.text_input("New name")
    st.caption("Renaming onto an existing term merges both page lists.")
    if st.button("Rename"):
        try:
            ok = directory.update_term_name(old_name, new_name)
        except ValueError as e:
            st.error(f"❌ {e}")
        else:
            if ok:
                st.success("✅ Term renamed.")
            else:
                st.error("❌ Term not found.")

elif page == "Prefix search":
    st.header("🔍 Prefix search")
    prefix = st.text_input("Prefix")
    if prefix:
        matches = directory.get_terms_with_prefix(prefix)
        if matches:
            st.dataframe(terms_to_frame(matches), use_container_width=True)
        else:
            st.info(f"No terms start with \"{prefix}\".")

elif page == "Most frequent term":
    st.header("🏆 Most frequent term")
    term = directory.get_most_frequent_term()
    if term is None:
        st.info("The index is empty.")
    else:
        st.metric(term.name, f"{term.page_count} pages")
        st.write(str(term))

elif page == "Full index":
    st.header("📋 Full index")
    terms = directory.get_all_terms()
    if not terms:
        st.info("The index is empty.")
    else:
        summary = page_count_summary(terms)
        col1, col2, col3, col4 = st.columns(4)
        with col1:
            st.metric("Terms", summary["terms"])
        with col2:
            st.metric("Total pages", summary["total_pages"])
        with col3:
            st.metric("Mean pages", f"{summary['mean_pages']:.2f}")
        with col4:
            st.metric("Max pages", summary["max_pages"])

        df = terms_to_frame(terms)
        st.dataframe(df, use_container_width=True)

        top = df.sort_values("page_count", ascending=False, kind="stable").head(25)
        fig = px.bar(top, x="term", y="page_count", title="Pages per term (top 25)")
        st.plotly_chart(fig, use_container_width=True)

elif page == "Save to file":
    st.header("💾 Save to file")
    filename = st.text_input("File name", value="terms.txt")
    st.download_button(
        "Download",
        data="\n".join(dump_lines(directory)) + "\n",
        file_name=filename or "terms.txt",
        mime="text/plain",
    )
    if st.button("Save on server"):
        if save_to_file(filename, directory, StorageConfig()):
            st.success(f"✅ Saved to {StorageConfig().save_dir}/{filename}")
        else:
            st.error("❌ Error saving the file.")

elif page == "Sample data":
    st.header("🎲 Sample data")
    num_terms = st.number_input("Number of terms", min_value=1, max_value=5000, value=100)
    seed = st.number_input("Seed", min_value=0, value=42)
    if st.button("Generate"):
        WorkLoad(seed=int(seed)).populate(directory, int(num_terms))
        st.success(f"✅ The index now holds {len(directory)} terms.")

# Footer
st.markdown("---")
st.markdown(
    """
    <div style='text-align: center; color: #B0B0B0; padding: 1rem;'>
        Built with Streamlit 🚀 | Term Index
    </div>
    """,
    unsafe_allow_html=True
)

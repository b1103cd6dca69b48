"""
Streamlit frontend for the Solace advocate directory.

Calls GET http://localhost:8000/api/advocates once per session, then filters
the list in memory on every query change and renders it as a table.

Run with:
    streamlit run frontend/ui.py
"""

import sys
from pathlib import Path

import streamlit as st

# Ensure project root is on sys.path when launched via `streamlit run`
sys.path.insert(0, str(Path(__file__).parent.parent))

from directory.search import city_options, search_advocates, specialty_options, tokenize
from frontend.client import FetchError, fetch_advocates
from frontend.view import advocate_rows, empty_state, result_summary

ALL_SPECIALTIES = "All specialties"
ALL_CITIES      = "All cities"

st.set_page_config(page_title="Solace Advocates", layout="wide")
st.title("Solace Advocates")
st.caption("Find the right mental health advocate for your needs")


# ---------------------------------------------------------------------------
# Load once per session
# ---------------------------------------------------------------------------

if "advocates" not in st.session_state:
    with st.spinner("Loading advocates..."):
        try:
            st.session_state.advocates = fetch_advocates()
            st.session_state.fetch_error = None
        except FetchError as exc:
            st.session_state.advocates = []
            st.session_state.fetch_error = str(exc)

if st.session_state.fetch_error:
    st.error(f"Error: {st.session_state.fetch_error}")
    st.stop()

advocates = st.session_state.advocates


# ---------------------------------------------------------------------------
# Search controls
# ---------------------------------------------------------------------------

def _reset() -> None:
    st.session_state.search_term = ""


col_search, col_reset = st.columns([6, 1], vertical_alignment="bottom")
with col_search:
    st.text_input(
        "Search Advocates",
        key="search_term",
        placeholder="Search by multiple terms, e.g., 'john md' or 'anxiety therapist'...",
    )
with col_reset:
    st.button("Reset", key="reset", on_click=_reset)

search_term = st.session_state.search_term
tokens = tokenize(search_term)
if tokens:
    st.markdown("Searching for: " + " ".join(f"`{t}`" for t in tokens))

with st.sidebar:
    st.header("Filters")
    specialty = st.selectbox(
        "Specialty", [ALL_SPECIALTIES] + specialty_options(advocates), key="specialty"
    )
    city = st.selectbox("City", [ALL_CITIES] + city_options(advocates), key="city")
    max_years = max((a["yearsOfExperience"] for a in advocates), default=0)
    if max_years > 0:
        min_experience = st.slider(
            "Minimum years of experience", 0, max_years, 0, key="min_experience"
        )
    else:
        min_experience = 0


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

filtered = search_advocates(
    advocates,
    search_term,
    specialty=None if specialty == ALL_SPECIALTIES else specialty,
    city=None if city == ALL_CITIES else city,
    min_experience=min_experience or None,
)

st.markdown(result_summary(len(filtered), len(advocates)))

if filtered:
    st.dataframe(advocate_rows(filtered), hide_index=True)

empty = empty_state(len(advocates), len(filtered))
if empty:
    heading, message = empty
    st.subheader(heading)
    st.caption(message)

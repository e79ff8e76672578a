import streamlit as st

from utils.settings import PAGE_TITLE

st.title(PAGE_TITLE)

st.markdown("""
An interactive map of public infrastructure in Dutse, Jigawa State: hospitals,
schools, transport hubs, utilities and emergency services.
""")

st.markdown("### Features")

col1, col2 = st.columns(2)

with col1:
    st.markdown("""
    **Category Filter**

    Show every point of interest at once, or narrow the map down to a single
    infrastructure category with one click.
    """)

with col2:
    st.markdown("""
    **Layer Control**

    Each category is its own colored layer. Toggle layers on the map and click
    any marker to see its name and description.
    """)

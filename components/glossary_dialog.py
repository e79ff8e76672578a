"""Reusable glossary dialog component for map terms and category colors."""

import streamlit as st


def render_glossary_button(button_label="📚 Glossary", help_text="What the map shows", glossary_terms=None):
    """
    Render a button that opens a glossary dialog when clicked.

    Args:
        button_label: Text for the button (default: "📚 Glossary")
        help_text: Tooltip text for the button
        glossary_terms: Optional custom glossary dict (defaults to GLOSSARY_TERMS from glossary_definitions)
    """
    if glossary_terms is None:
        from components.glossary_definitions import GLOSSARY_TERMS
        glossary_terms = GLOSSARY_TERMS

    if st.button(button_label, help=help_text, width="stretch"):
        show_glossary_dialog(glossary_terms)


def color_swatch_html(color: str) -> str:
    """Small colored dot matching a layer's marker color."""
    return (
        f'<span style="display:inline-block;width:10px;height:10px;border-radius:50%;'
        f'background:{color};margin-right:6px;"></span>'
    )


@st.dialog("Glossary", width="large")
def show_glossary_dialog(glossary_terms):
    """Display glossary content in a modal dialog, one expander per section."""
    st.markdown("### About this map")

    for section_key, section_data in glossary_terms.items():
        icon = section_data.get('icon', '•')
        label = section_data.get('label', section_key.title())

        with st.expander(f"{icon} {label}", expanded=True):
            for term_name, term_data in section_data.get('terms', {}).items():
                if 'color' in term_data:
                    st.markdown(f"{color_swatch_html(term_data['color'])}**{term_name}**", unsafe_allow_html=True)
                else:
                    st.markdown(f"**{term_name}**")

                if 'definition' in term_data:
                    st.markdown(term_data['definition'])

                if 'note' in term_data:
                    st.caption(f"_Note: {term_data['note']}_")

                st.markdown("")

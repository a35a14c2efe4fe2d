"""Unit conversion engine with a Streamlit form and a command-line interface."""

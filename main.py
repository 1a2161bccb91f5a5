"""
Entry point for the Aortic Upper Limits calculator.

This file imports and runs the main Streamlit application.
"""

import sys
from pathlib import Path

import streamlit as st

# Add project root and src/ to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))
sys.path.insert(0, str(project_root / "src"))

# Configure Streamlit page layout each rerun
st.set_page_config(
    page_title="Aortic Upper Limits",
    page_icon="🫀",
    layout="wide",
    initial_sidebar_state="expanded"
)

from src.app import main

if __name__ == "__main__":
    main()

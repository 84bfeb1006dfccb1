"""
Streamlit entry point.

Run with:
    streamlit run ui/app.py
"""

from views.dashboard import render

render()

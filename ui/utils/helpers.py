import plotly.graph_objects as go
import streamlit as st


def report_failure(status, data, action):
    """Show an error banner for a failed API call; return True if it failed."""
    if status < 400:
        return False
    message = data.get("error") or data.get("message") or "Unknown error"
    st.error(f"Error {action}: {message}")
    return True


def series_chart(series):
    """Bar chart of a ``/reports/series`` payload, bars in the order the API sent them."""
    fig = go.Figure(
        go.Bar(
            x=series["labels"],
            y=series["values"],
            name=series["name"],
            marker_color="#3182ce",
            hovertemplate="%{x}<br>$%{y:,.2f}<extra></extra>",
        )
    )
    # categoryorder="trace" keeps the series order instead of sorting labels as text
    fig.update_xaxes(type="category", categoryorder="trace")
    fig.update_layout(showlegend=False, margin=dict(t=10, b=10, l=10, r=10))
    return fig

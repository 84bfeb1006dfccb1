from datetime import date

import streamlit as st
from api.client import delete, get, post, put
from utils.helpers import report_failure, series_chart

EMPTY_FORM = {"title": "", "amount": 0.0, "category": "", "date": None, "notes": ""}


def _start_edit(expense):
    st.session_state["editing_id"] = expense["id"]
    st.session_state["form"] = {
        "title": expense["title"],
        "amount": expense["amount"],
        "category": expense["category"],
        "date": date.fromisoformat(expense["date"]),
        "notes": expense["notes"] or "",
    }


def _cancel_edit():
    st.session_state["editing_id"] = None
    st.session_state["form"] = dict(EMPTY_FORM)


def _expense_form():
    editing_id = st.session_state.get("editing_id")
    values = st.session_state.setdefault("form", dict(EMPTY_FORM))

    st.subheader("Edit Expense" if editing_id else "Add Expense")

    with st.form("expense_form", clear_on_submit=not editing_id):
        title = st.text_input("Title", value=values["title"])
        amount = st.number_input("Amount", value=float(values["amount"]), step=0.01, format="%.2f")
        category = st.text_input("Category", value=values["category"])
        spent_on = st.date_input("Date", value=values["date"] or date.today())
        notes = st.text_area("Notes", value=values["notes"])
        submitted = st.form_submit_button("Update Expense" if editing_id else "Add Expense")

    if editing_id:
        st.button("Cancel Edit", on_click=_cancel_edit)

    if not submitted:
        return

    payload = {
        "title": title,
        "amount": amount,
        "category": category,
        "date": spent_on.isoformat(),
        "notes": notes,
    }

    if editing_id:
        status, data = put(f"expenses/{editing_id}", payload)
        if report_failure(status, data, "updating expense"):
            return
        st.success("Expense updated!")
        _cancel_edit()
    else:
        status, data = post("expenses", payload)
        if report_failure(status, data, "adding expense"):
            return
    st.rerun()


def _month_section(month):
    with st.expander(f"{month['label']}  ·  Total: {month['totalDisplay']}"):
        for cell in month["categories"]:
            st.markdown(f"#### {cell['label']} — {cell['totalDisplay']}")
            # cells keep feed order; show newest first
            items = sorted(cell["items"], key=lambda e: e["date"], reverse=True)
            for exp in items:
                st.markdown(f"**{exp['title']}** — {exp['amountDisplay']}")
                st.caption(f"Date: {exp['displayDate']}")
                if exp["notes"]:
                    st.write(f"Notes: {exp['notes']}")

                col_del, col_edit, _ = st.columns([1, 1, 6])
                if col_del.button("Delete", key=f"delete-{exp['id']}"):
                    status, data = delete(f"expenses/{exp['id']}")
                    if not report_failure(status, data, "deleting expense"):
                        st.rerun()
                col_edit.button("Edit", key=f"edit-{exp['id']}", on_click=_start_edit, args=(exp,))


def render():

    st.set_page_config(layout="wide")

    st.title("Dashboard")

    _expense_form()

    st.divider()

    search = st.text_input("Search expenses...", key="search")

    status, view = get("reports/dashboard", params={"q": search})
    if report_failure(status, view, "loading expenses"):
        return

    # =====================================================
    # Monthly chart (unfiltered)
    # =====================================================
    st.subheader("Monthly Spending")

    if view["series"]["labels"]:
        st.plotly_chart(series_chart(view["series"]), use_container_width=True)
    else:
        st.info("No expenses yet")

    if view["expenseCount"] == 0:
        return

    st.markdown(f"### Total spent: {view['totalDisplay']}")

    st.divider()

    # =====================================================
    # Month breakdown (filtered)
    # =====================================================
    if not view["months"]:
        st.info(f"No expenses match {search!r}.")

    for month in view["months"]:
        _month_section(month)

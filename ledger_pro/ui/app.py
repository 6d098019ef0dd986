"""Streamlit entrypoint for the Ledger Pro client."""

from __future__ import annotations

import logging
from datetime import date

import streamlit as st

from ledger_pro.api.schemas import Transaction
from ledger_pro.config.settings import Settings, get_settings
from ledger_pro.state.transactions import TransactionForm
from ledger_pro.state.workspace import Workspace
from ledger_pro.ui.formatting import display_text, format_date, format_money

DESCRIPTION = "Ledger Pro"
WORKSPACE_KEY = "ledger_workspace"


def _configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level_value,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def transaction_rows(transactions: list[Transaction]) -> list[dict[str, str]]:
    return [
        {
            "Date": format_date(tx.date_of_entry),
            "Reference": display_text(tx.reference),
            "Description": display_text(tx.description),
            "Debit": format_money(tx.debit),
            "Credit": format_money(tx.credit),
            "Due On": format_date(tx.due_on) if tx.due_on else display_text(None),
            "Remarks": display_text(tx.remarks),
            "Balance": format_money(tx.balance),
        }
        for tx in transactions
    ]


def record_count_label(workspace: Workspace) -> str:
    return f"{len(workspace.transactions())} records"


def _iso_or_blank(value: date | None) -> str:
    return value.isoformat() if value else ""


def _get_workspace() -> Workspace:
    workspace = st.session_state.get(WORKSPACE_KEY)
    if workspace is None:
        workspace = Workspace.from_settings(get_settings())
        st.session_state[WORKSPACE_KEY] = workspace
        workspace.start()
    return workspace


def render_login(workspace: Workspace) -> None:
    st.title(DESCRIPTION)
    st.caption("Financial Ledger Management")
    if workspace.login_error:
        st.error(workspace.login_error)
    with st.form("login"):
        username = st.text_input(
            "Username", value=workspace.login_form.username, autocomplete="username"
        )
        password = st.text_input(
            "Password",
            value=workspace.login_form.password,
            type="password",
            autocomplete="current-password",
        )
        submitted = st.form_submit_button("Sign In", type="primary")
    if submitted:
        workspace.login(username, password)
        st.rerun()


def render_account_picker(workspace: Workspace) -> None:
    selected = workspace.selected_account()
    st.sidebar.markdown(f"**Account:** {selected.name if selected else 'Select Account'}")
    accounts = workspace.ordered_accounts()
    if not accounts:
        st.sidebar.caption("No accounts yet")
        return
    for account in accounts:
        locked = workspace.registry.is_locked(account.id)
        lock_col, name_col = st.sidebar.columns((1, 4))
        if lock_col.button(
            "🔒" if locked else "🔓",
            key=f"lock_{account.id}",
            help="Unlock account" if locked else "Lock account",
        ):
            workspace.toggle_lock(account.id)
            st.rerun()
        if name_col.button(
            account.name,
            key=f"select_{account.id}",
            disabled=locked,
            type="primary" if account.id == workspace.selection else "secondary",
            width="stretch",
        ):
            workspace.select(account.id)
            st.rerun()


def render_new_account(workspace: Workspace) -> None:
    with st.sidebar.expander("+ New Account"):
        with st.form("new_account"):
            name = st.text_input(
                "Account name",
                value=workspace.account_name_input,
                placeholder="e.g. Travel Fund, Business Account",
            )
            submitted = st.form_submit_button("Create Account", type="primary")
        if submitted:
            workspace.create_account(name)
            st.rerun()


def render_navbar(workspace: Workspace) -> None:
    identity = workspace.identity
    st.sidebar.title(DESCRIPTION)
    if identity is not None:
        st.sidebar.write(f"Hi, {identity.username}")
    render_account_picker(workspace)
    render_new_account(workspace)
    if st.sidebar.button("Refresh accounts"):
        workspace.load_accounts()
        st.rerun()
    if st.sidebar.button("Logout"):
        workspace.logout()
        st.rerun()


def render_transaction_form(workspace: Workspace) -> None:
    allowed = workspace.can_transact()
    with st.expander("+ New Transaction", expanded=False):
        if not allowed:
            st.info("This account is locked; unlock it to add transactions.")
        with st.form("new_transaction"):
            left, right = st.columns(2)
            entry_date = left.date_input("Date of entry *", value=None, disabled=not allowed)
            due_date = right.date_input("Due on", value=None, disabled=not allowed)
            reference = left.text_input("Reference", placeholder="INV-001", disabled=not allowed)
            description = right.text_input(
                "Description", placeholder="Transaction details", disabled=not allowed
            )
            debit = left.text_input("Debit", disabled=not allowed)
            credit = right.text_input("Credit", disabled=not allowed)
            remarks = st.text_area(
                "Remarks", placeholder="Additional notes...", disabled=not allowed
            )
            submitted = st.form_submit_button(
                "Add Transaction", type="primary", disabled=not allowed
            )
    # guard also applies at submit time, not only at render
    if submitted and workspace.can_transact():
        form = TransactionForm(
            date_of_entry=_iso_or_blank(entry_date),
            due_on=_iso_or_blank(due_date),
            reference=reference,
            description=description,
            debit=debit,
            credit=credit,
            remarks=remarks,
        )
        workspace.add_transaction(form)
        st.rerun()


def render_dashboard(workspace: Workspace) -> None:
    if workspace.error:
        st.error(workspace.error)
    account = workspace.selected_account()
    if account is None:
        st.header("No Account Selected")
        st.write(
            "Create a new account or select one from the sidebar to get started."
        )
        return
    st.header(account.name)
    st.caption("Account Overview")
    totals = workspace.totals()
    debit_col, credit_col, balance_col = st.columns(3)
    debit_col.metric("Total Debit", format_money(totals.total_debit))
    credit_col.metric("Total Credit", format_money(totals.total_credit))
    balance_col.metric("Current Balance", format_money(totals.balance))
    render_transaction_form(workspace)
    st.subheader("Recent Transactions")
    st.caption(record_count_label(workspace))
    rows = transaction_rows(workspace.transactions())
    if rows:
        st.table(rows)
    else:
        st.info("No transactions yet. Add one to get started.")


def run() -> None:
    settings = get_settings()
    _configure_logging(settings)
    st.set_page_config(page_title=DESCRIPTION)
    workspace = _get_workspace()
    if workspace.identity is None:
        render_login(workspace)
        return
    render_navbar(workspace)
    render_dashboard(workspace)


if __name__ == "__main__":
    run()

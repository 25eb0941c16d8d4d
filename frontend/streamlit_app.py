import streamlit as st
from typing import Any, Dict, List

from rentadvisor.schemas import PropertySubject, UnitStatus, UnitType
from rentadvisor.ui.api_client import fetch_prediction, resolve_api_base
from rentadvisor.ui.form_state import RentForm

st.set_page_config(
    page_title="Rental Price Prediction Tool",
    page_icon="🏠",
    layout="centered",
    initial_sidebar_state="collapsed"
)

st.markdown("""
<style>
    @import url('https://fonts.googleapis.com/css2?family=Poppins:wght@300;400;500;600;700&display=swap');

    .stApp {
        background: #f9fafb;
    }

    :root {
        --primary: #2563eb;
        --light: #eff6ff;
        --dark: #111827;
        --error: #dc2626;
    }

    h1, h2, h3, h4, h5, h6 {
        font-family: 'Poppins', sans-serif !important;
        color: var(--dark) !important;
    }

    .ra-hero {
        text-align: center;
        padding: 3rem 1rem;
        margin-bottom: 2rem;
        background: linear-gradient(90deg, #eff6ff 0%, #dbeafe 100%);
        border-radius: 12px;
    }

    .ra-hero h2 {
        font-size: 1.6rem;
        font-weight: 600;
        margin-bottom: 1rem;
    }

    .ra-hero p {
        color: #374151;
    }

    .ra-field-error {
        color: var(--error);
        font-size: 0.85rem;
        margin-top: -0.75rem;
        margin-bottom: 0.75rem;
    }

    .ra-result-label {
        font-weight: 600;
        color: var(--dark);
    }
</style>
""", unsafe_allow_html=True)

SELECT_FIELDS = [
    ("propertySubject", "Property Subject", [c.value for c in PropertySubject]),
    ("unitType", "Unit Type", [c.value for c in UnitType]),
    ("unitStatus", "Unit Status", [c.value for c in UnitStatus]),
]

NUMBER_FIELDS = [
    ("occupiedUnits", "Occupied Units"),
    ("vacantUnits", "Vacant Units"),
    ("clientBaseRent", "Client Base Rent ($)"),
    ("clientRentOfCare", "Client Rent of Care ($)"),
    ("marketBaseRent", "Market Base Rent ($)"),
    ("marketRentOfCare", "Market Rent of Care ($)"),
    ("desiredOccupancy", "Desired Occupancy Rate (%)"),
]

RESULT_LABELS = ["Info", "Suggested Base Rent", "Suggested Rent of Care", "Recommendation"]

if "form" not in st.session_state:
    st.session_state.form = RentForm()
if "submit_requested" not in st.session_state:
    st.session_state.submit_requested = False
if "open_panel" not in st.session_state:
    st.session_state.open_panel = False

API_BASE = resolve_api_base()


def _widget_key(field: str) -> str:
    return f"field_{field}"


def _on_field_change(field: str):
    form: RentForm = st.session_state.form
    key = _widget_key(field)
    if not form.update(field, st.session_state[key]):
        # rejected keystroke: put the last accepted value back
        st.session_state[key] = form.values[field]


def _request_submit():
    st.session_state.submit_requested = True


def _dispatch(payload: Dict[str, Any]) -> List[Any]:
    return fetch_prediction(payload, API_BASE)


def _show_field_error(field: str):
    error = st.session_state.form.errors.get(field)
    if error:
        st.markdown(f"<div class='ra-field-error'>{error}</div>", unsafe_allow_html=True)


@st.dialog("Rent Recommendation")
def show_result_dialog():
    form: RentForm = st.session_state.form
    if form.result is None:
        return
    for label, value in zip(RESULT_LABELS, form.result.as_list()):
        st.markdown(f"<div class='ra-result-label'>{label}</div>", unsafe_allow_html=True)
        # st.text keeps $ and * literal
        st.text(str(value))
    if st.button("Close", key="close_result_btn", use_container_width=True):
        form.dismiss()
        st.rerun()


@st.dialog("Prediction Failed")
def show_error_dialog():
    form: RentForm = st.session_state.form
    st.error("The rent prediction could not be completed.")
    st.text(form.failure or "Failed to fetch prediction")
    if st.button("Close", key="close_error_btn", use_container_width=True):
        form.dismiss()
        st.rerun()


def show_header():
    st.markdown("## Rental Price Prediction Tool")
    st.markdown("""
    <div class="ra-hero">
        <h2>Predict the optimal rental price with ease 🚀</h2>
        <p>Enter your property details and calculate the recommended rent in seconds.</p>
    </div>
    """, unsafe_allow_html=True)


def show_property_form():
    """Render the inputs; values live in RentForm, widgets only mirror them."""
    form: RentForm = st.session_state.form

    st.markdown("### Property Details")
    col1, col2 = st.columns(2)
    columns = [col1, col2]

    for i, (field, label, options) in enumerate(SELECT_FIELDS):
        key = _widget_key(field)
        if key not in st.session_state:
            st.session_state[key] = form.values[field]
        with columns[i % 2]:
            st.selectbox(label, options, key=key, on_change=_on_field_change, args=(field,))
            _show_field_error(field)

    for i, (field, label) in enumerate(NUMBER_FIELDS, start=len(SELECT_FIELDS)):
        key = _widget_key(field)
        if key not in st.session_state:
            st.session_state[key] = form.values[field]
        with columns[i % 2]:
            st.text_input(label, key=key, on_change=_on_field_change, args=(field,))
            _show_field_error(field)

    busy = form.loading or st.session_state.submit_requested
    st.button(
        "Submit",
        key="submit_btn",
        type="primary",
        use_container_width=True,
        disabled=busy,
        on_click=_request_submit,
    )


def handle_submission():
    form: RentForm = st.session_state.form
    if not st.session_state.submit_requested:
        return
    st.session_state.submit_requested = False

    with st.spinner("Calculating recommended rent…"):
        dispatched = form.submit(_dispatch)
    if dispatched:
        st.session_state.open_panel = True
    st.rerun()


def show_panels():
    form: RentForm = st.session_state.form
    if not st.session_state.open_panel:
        return
    st.session_state.open_panel = False
    if form.result is not None:
        show_result_dialog()
    elif form.failure is not None:
        show_error_dialog()


def main():
    show_header()
    show_property_form()
    handle_submission()
    show_panels()


if __name__ == "__main__":
    main()

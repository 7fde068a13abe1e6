import streamlit as st

from config import RESOURCE_URL, setup_logging
from state.resource_state import CREATE, DELETE, ResourceState

setup_logging()

st.set_page_config(
    page_title="Lista de Produtos",
    layout="centered"
)


def get_resource_state() -> ResourceState:
    if "resource_state" not in st.session_state:
        st.session_state.resource_state = ResourceState(RESOURCE_URL)
    return st.session_state.resource_state


def submit_product():
    product = {
        "name": st.session_state.name,
        "price": st.session_state.price,
    }
    get_resource_state().request_mutation(product, CREATE)

    # Fields reset right away, the list only changes after the next read
    st.session_state.name = ""
    st.session_state.price = None


def remove_product(product_id):
    get_resource_state().request_mutation(product_id, DELETE)


state = get_resource_state()
state.sync()

st.title("Lista de Produtos")

# ---------------- Status ----------------
if state.loading and not state.error:
    st.info("Carregando dados...")

if state.error:
    st.error(state.error)

# ---------------- Product List ----------------
if not state.loading:
    for product in state.data or []:
        row, action = st.columns([4, 1])
        price = product.get("price")
        row.text(f"{product['name']} - R$: {'' if price is None else price}")
        action.button(
            "remove",
            key=f"remove-{product['id']}",
            on_click=remove_product,
            args=(product["id"],)
        )

# ---------------- Add Product ----------------
st.divider()

with st.form("add_product_form"):
    st.text_input("Nome:", key="name", autocomplete="off")
    st.number_input("Preço:", key="price", value=None, min_value=0.0, step=0.01)
    st.form_submit_button(
        "Aguarde" if state.loading else "Enviar",
        disabled=state.loading,
        on_click=submit_product
    )

# Keep the loading window visible, then redraw with the list
if state.loading:
    state.wait_for_loading_window()
    st.rerun()

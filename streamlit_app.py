"""
Recipe Assistant - Home Page

Find a recipe by the ingredients you have, then cook it hands-free:
the assistant reads each step aloud and listens for "next", "repeat",
"back" and friends.
"""

import logging

import streamlit as st

# Page configuration (must be first Streamlit command)
st.set_page_config(
    page_title="Recipe Assistant",
    page_icon="🍳",
    layout="wide"
)

from config.settings import get_settings
from views.home_view import HomeView

logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

view = HomeView()
view.render()

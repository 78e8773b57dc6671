import html
import sys
import streamlit as st
from pathlib import Path

# Ensure project root is on sys.path when running on Streamlit Cloud
repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from backend.api_client import YogaApiClient
from backend.catalog import CatalogError, WorkoutCatalog
from backend.config import AppConfig, setup_logging
from backend.home import Alert, HomeViewModel, Navigation
from frontend.styles import stylesheet

config = AppConfig.from_env()
setup_logging(config.log_level)

st.set_page_config(page_title="Yoga Home", page_icon="🧘", layout="centered")
st.markdown(stylesheet(), unsafe_allow_html=True)


def make_view_model() -> HomeViewModel:
    catalog = None
    if config.workouts_csv:
        try:
            catalog = WorkoutCatalog.from_csv(config.workouts_csv)
        except CatalogError as e:
            st.error(f"Failed to load offline catalog: {e}")
    client = YogaApiClient(config.api_base_url, timeout=config.api_timeout)
    vm = HomeViewModel(client, user_name=config.user_name, catalog=catalog)
    vm.load()
    return vm


if "home" not in st.session_state:
    with st.spinner("Загрузка..."):
        st.session_state.home = make_view_model()
vm: HomeViewModel = st.session_state.home


def show_action(action) -> None:
    if action is None:
        return
    if isinstance(action, Alert):
        st.session_state.pop("screen", None)
        st.session_state.alert = action
    elif isinstance(action, Navigation):
        st.session_state.pop("alert", None)
        st.session_state.screen = action


if vm.loading:
    st.write("Загрузка...")
    st.stop()

st.markdown(f"<div class='greeting text-bold'>Привет, {html.escape(vm.user_name)}</div>", unsafe_allow_html=True)

# Current workout card with day selector
if vm.current_workout is not None:
    w = vm.current_workout
    col_prev, col_day, col_next, col_plan = st.columns([1, 3, 1, 3])
    with col_prev:
        if st.button("◀", disabled=not vm.can_retreat, key="prev_day"):
            vm.retreat_day()
            st.rerun()
    with col_day:
        st.markdown(f"<div class='day-text text'>ДЕНЬ {vm.current_day}</div>", unsafe_allow_html=True)
    with col_next:
        if st.button("▶", disabled=not vm.can_advance, key="next_day"):
            vm.advance_day()
            st.rerun()
    with col_plan:
        st.markdown("<div class='plan text'>твой план</div>", unsafe_allow_html=True)

    st.markdown(
        "<div class='workout-card'>"
        f"<div class='workout-title text'>{html.escape(w.title)}</div>"
        f"<div><span class='workout-chip'>{html.escape(w.duration_label)}</span>"
        f"<span class='workout-chip'>{w.calories} ккал</span></div>"
        "</div>",
        unsafe_allow_html=True,
    )
    if st.button("▶ Начать", key="play"):
        show_action(vm.open_current_workout())

st.markdown("<div class='section-title text'>Популярные практики</div>", unsafe_allow_html=True)

cols = st.columns(2)
for i, category in enumerate(vm.categories):
    with cols[i % 2]:
        st.markdown(f"<div class='category-card text'>{html.escape(category.title)}</div>", unsafe_allow_html=True)
        if st.button("Открыть", key=f"category_{category.id}", width="stretch"):
            with st.spinner("Загрузка уроков..."):
                show_action(vm.select_category(category))

alert = st.session_state.get("alert")
if alert is not None:
    st.error(f"**{alert.title}**\n\n{alert.message}")
    if st.button(alert.buttons[0], key="dismiss_alert"):
        st.session_state.pop("alert", None)
        st.rerun()

screen = st.session_state.get("screen")
if screen is not None:
    st.markdown("---")
    if screen.screen == "CategoryScreen":
        st.subheader(screen.params["categoryTitle"])
        st.json(screen.params["lessons"])
    elif screen.screen == "WorkoutDetails" and vm.current_workout is not None:
        st.subheader(vm.current_workout.title)
        for ex in vm.current_workout.exercises:
            st.markdown(f"**{ex.name}** · {ex.duration} мин")
            if ex.video_url:
                st.video(ex.video_url)
    if st.button("Назад", key="close_screen"):
        st.session_state.pop("screen", None)
        st.rerun()

import time
from dataclasses import dataclass
from typing import Optional

import streamlit as st
from pyrsistent import thaw

from grid_walk.colors import CLASSIC_COLORS
from grid_walk.config import DEFAULT_TICK_PERIOD, WalkConfig
from grid_walk.log import configure_logging
from grid_walk.simulation import Simulation

FRAMES_PER_SECOND = 30
RESOLUTION = 600


@dataclass(frozen=True)
class AppConfig:
    seed: Optional[int]
    tick_period: float
    classic_colors: bool


st.set_page_config(layout="wide", page_title="Grid Walk")


def get_config_from_widgets() -> AppConfig:
    st.subheader("Random seed")
    fixed_seed = st.checkbox("Fixed seed", value=False, key="fixed_seed")
    seed: Optional[int] = None
    if fixed_seed:
        seed = int(st.number_input("Random seed", min_value=0, value=0, key="seed"))
    st.subheader("Timing")
    tick_period = st.slider(
        "Tick period (s)", 0.1, 3.0, DEFAULT_TICK_PERIOD, step=0.1, key="tick_period"
    )
    classic_colors = st.checkbox(
        "Start with red / blue", value=False, key="classic_colors"
    )
    return AppConfig(seed=seed, tick_period=tick_period, classic_colors=classic_colors)


def make_simulation(config: AppConfig) -> None:
    """Create a simulation for ``config`` and restart the clock."""
    try:
        walk_config = WalkConfig(
            seed=config.seed,
            tick_period=config.tick_period,
            initial_colors=CLASSIC_COLORS if config.classic_colors else None,
        )
    except ValueError as e:
        st.error(f"Invalid configuration: {e}")
        return
    st.session_state["sim"] = Simulation(walk_config, resolution=RESOLUTION)
    st.session_state["start"] = time.monotonic()
    st.session_state["app_config"] = config


if "log_configured" not in st.session_state:
    configure_logging()
    st.session_state["log_configured"] = True

with st.sidebar:
    config = get_config_from_widgets()
    if st.button("🔁 Restart", key="restart_btn", use_container_width=True):
        make_simulation(config)
    running = st.toggle("Running", value=True, key="running")

if "sim" not in st.session_state or st.session_state["app_config"] != config:
    make_simulation(config)

if "sim" not in st.session_state:
    st.stop()

sim: Simulation = st.session_state["sim"]

left_col, right_col = st.columns([0.65, 0.35])
with left_col:
    frame_slot = st.empty()
with right_col:
    stats_slot = st.empty()
    state_slot = st.empty()


def draw_frame() -> None:
    elapsed = time.monotonic() - st.session_state["start"]
    state = sim.update(elapsed)
    frame_slot.image(sim.render(elapsed), use_container_width=True)
    stats_slot.info(
        f"**Grid:** {state.grid.size} × {state.grid.size}  "
        f"**Ticks:** {state.tick}  **Growths:** {state.growths}",
        icon="🧭",
    )
    state_slot.json(thaw(state.description), expanded=1)


draw_frame()
while running:
    time.sleep(1.0 / FRAMES_PER_SECOND)
    draw_frame()

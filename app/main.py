from dataclasses import replace
from typing import Optional

import streamlit as st
from pyrsistent import thaw

from icon_chase.actions import GymAction
from icon_chase.config import DEFAULT_CONFIG, GameConfig
from icon_chase.gym_env import IconChaseEnv
from icon_chase.snapshot import snapshot_dict
from icon_chase.types import Phase


st.set_page_config(layout="wide", page_title="Icon Chase")


def make_env_and_reset(config: GameConfig, seed: Optional[int]) -> None:
    env = IconChaseEnv(config=config, seed=seed)
    obs, info = env.reset()
    st.session_state["env"] = env
    st.session_state["obs"] = obs
    st.session_state["info"] = info


def do_action(env: IconChaseEnv, action: GymAction) -> None:
    obs, _, terminated, truncated, info = env.step(action)
    st.session_state["obs"] = obs
    st.session_state["info"] = info
    st.session_state["game_over"] = terminated or truncated


def get_config_from_widgets() -> GameConfig:
    config: GameConfig = st.session_state["config"]
    num_baddies = st.number_input(
        "Baddies", min_value=0, max_value=8, value=config.num_baddies
    )
    baddie_speed = st.slider(
        "Baddie speed", min_value=0.5, max_value=6.0, value=float(config.baddie_speed)
    )
    player_speed = st.slider(
        "Player speed", min_value=0.5, max_value=8.0, value=float(config.player_speed)
    )
    greedy_chance = st.slider(
        "Baddie greediness", min_value=0.0, max_value=1.0, value=config.greedy_chance
    )
    return replace(
        config,
        num_baddies=int(num_baddies),
        baddie_speed=baddie_speed,
        player_speed=player_speed,
        greedy_chance=greedy_chance,
    )


# --------- Main App ---------

if "config" not in st.session_state:
    st.session_state["config"] = DEFAULT_CONFIG
    st.session_state["seed"] = 0

tab_game, tab_config, tab_state = st.tabs(["Game", "Config", "State"])

with tab_config:
    new_config = get_config_from_widgets()
    seed = st.number_input("Seed", value=st.session_state["seed"], step=1)
    if st.button("Save", key="save_config_btn", use_container_width=True):
        st.session_state["config"] = new_config
        st.session_state["seed"] = int(seed)
        make_env_and_reset(new_config, int(seed))

with tab_game:
    if "env" not in st.session_state:
        make_env_and_reset(st.session_state["config"], st.session_state["seed"])

    env: IconChaseEnv = st.session_state["env"]
    left_col, middle_col, right_col = st.columns([0.25, 0.5, 0.25])

    with right_col:
        _, up_col, _ = st.columns([1, 1, 1])
        with up_col:
            if st.button("⬆️", key="up_btn", use_container_width=True):
                do_action(env, GymAction.UP)
        left_btn, down_btn, right_btn = st.columns([1, 1, 1])
        with left_btn:
            if st.button("⬅️", key="left_btn", use_container_width=True):
                do_action(env, GymAction.LEFT)
        with down_btn:
            if st.button("⬇️", key="down_btn", use_container_width=True):
                do_action(env, GymAction.DOWN)
        with right_btn:
            if st.button("➡️", key="right_btn", use_container_width=True):
                do_action(env, GymAction.RIGHT)
        if st.button("⏳ Wait", key="wait_btn", use_container_width=True):
            do_action(env, GymAction.WAIT)

    state = env.session.state

    with left_col:
        st.info(f"**Score:** {state.score}", icon="🏅")
        remaining = sum(1 for c in state.collectible.values() if not c.collected)
        st.info(f"**Icons left:** {remaining}", icon="🎯")

    with middle_col:
        if state.phase == Phase.WON:
            st.success(f"🎉 **{state.message}** Final score: {state.score}")
            st.balloons()
        if state.phase == Phase.LOST:
            st.error(f"🐻 **{state.message}** Score: {state.score}")
        if state.phase in (Phase.WON, Phase.LOST):
            if st.button("Play Again", key="play_again_btn", use_container_width=True):
                env.reset()
                st.rerun()
        img = env.render(mode="texture")
        if img is not None:
            st.image(img.convert("P"), use_container_width=True)
        st.json(snapshot_dict(state), expanded=1)

with tab_state:
    st.json(thaw(env.session.state.description), expanded=1)

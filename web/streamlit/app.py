"""House Vote Tracker dashboard."""

import sys
from pathlib import Path

# Add project root to path (for streamlit which runs this file directly)
_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(_root))

import plotly.graph_objects as go  # noqa: E402
import streamlit as st  # noqa: E402
from loguru import logger  # noqa: E402

from app.container import container  # noqa: E402
from app.models.representatives import VoteCard  # noqa: E402
from app.services.representatives import filter_cards  # noqa: E402
from congress_client import UpstreamError  # noqa: E402
from settings import DEFAULT_CONGRESS, DEFAULT_LIMIT, DEFAULT_SESSION  # noqa: E402
from settings.logging import setup_logging  # noqa: E402
from web.api.errors import ApiError, validate_zip  # noqa: E402

st.set_page_config(page_title="House Vote Tracker", page_icon="🗳️", layout="wide")


@st.cache_resource(show_spinner=False)
def _startup():
    """Logging and container setup, once per server process."""
    setup_logging(to_file=True)
    container.init()
    container.start()
    return container


_startup()

COLORS = {
    "R": "#DC2626",
    "D": "#1E3A8A",
    "I": "#84CC16",
    "unknown": "#9CA3AF",
}


def color(party: str) -> str:
    return COLORS.get(party, "#6B7280")


def run(coro_fn, *args):
    """Run a view on the container loop shared by all sessions."""
    return container.run(coro_fn, *args)


def load_cards(congress: int, session: int, limit: int) -> list[VoteCard]:
    logger.info("Loading vote feed {}/{} (limit {})", congress, session, limit)
    views = run(container.feed.build, congress, session, limit)
    return [VoteCard(view=v) for v in views]


def party_chart(parties: list) -> go.Figure:
    labels = [p.name for p in parties]
    fig = go.Figure()
    for key, label in (("yea", "Yea"), ("nay", "Nay"), ("not_voting", "Not Voting")):
        fig.add_trace(go.Bar(name=label, x=labels, y=[getattr(p, key) for p in parties]))
    return fig.update_layout(barmode="group", margin=dict(t=20, b=20, l=20, r=20), height=250)


def render_card(card: VoteCard):
    view = card.view
    vote = view.vote
    heading = f"{vote.legislation_type or 'Motion'} {vote.legislation_number or ''}: {view.title}"

    with st.container(border=True):
        top, stamp = st.columns([5, 1])
        top.markdown(f"### {heading}")
        stamp.markdown(f"**Impact: {view.impact.upper()}**")

        if view.question:
            st.write(view.question)
        date = view.start_date.strftime("%m/%d/%Y") if view.start_date else "unknown"
        st.caption(f"Date: {date} · Result: {view.result or 'n/a'} · Roll call {view.roll_call_number}")

        if not vote.is_procedural:
            with st.expander("Bill Summary"):
                st.write(view.summary)

        if view.parties:
            st.plotly_chart(party_chart(view.parties), width="stretch", key=f"parties-{view.roll_call_number}")

            cols = st.columns(len(view.parties))
            for col, party in zip(cols, view.parties):
                col.markdown(
                    f"<span style='color:{color(party.party)}'><b>{party.name}</b></span>",
                    unsafe_allow_html=True,
                )
                col.write(f"Yea: {party.yea} · Nay: {party.nay} · Not Voting: {party.not_voting}")
                with col.expander("Members", expanded=card.filtered):
                    for m in party.members:
                        line = f"{m.full_name} ({m.state or '?'}): {m.vote_cast or 'n/a'}"
                        if card.is_member_highlighted(m):
                            st.markdown(f"⭐ **{line}**")
                        else:
                            st.write(line)


def main():
    st.title("🗳️ House Vote Tracker")

    with st.sidebar:
        congress = st.number_input("Congress", min_value=1, value=DEFAULT_CONGRESS)
        session = st.number_input("Session", min_value=1, max_value=2, value=DEFAULT_SESSION)
        limit = st.number_input("Votes", min_value=1, max_value=250, value=DEFAULT_LIMIT)

        st.subheader("Find my representative")
        zip_code = st.text_input("ZIP code", max_chars=5).strip()
        find, clear = st.columns(2)

    params = (int(congress), int(session), int(limit))
    if st.session_state.get("params") != params:
        with st.spinner("Loading votes... (approx. 5-10 seconds)"):
            try:
                st.session_state["cards"] = load_cards(*params)
            except UpstreamError as e:
                logger.warning("Vote feed failed: {}", e)
                st.error("Error loading votes. Please refresh.")
                return
        st.session_state["params"] = params

    cards: list[VoteCard] = st.session_state["cards"]

    if find.button("Filter"):
        try:
            validate_zip(zip_code)
        except ApiError as e:
            st.sidebar.error(e.message)
        else:
            rep = run(container.matcher.resolve, zip_code)
            if rep is None:
                st.sidebar.error("Rep not found")
            else:
                st.session_state["rep"] = rep
                cards = filter_cards(cards, rep)

    if clear.button("Clear"):
        st.session_state.pop("rep", None)
        cards = filter_cards(cards, None)

    st.session_state["cards"] = cards

    rep = st.session_state.get("rep")
    if rep is not None:
        st.info(f"Showing votes for Rep. {rep.first_name} {rep.last_name} ({rep.state}-{rep.district})")

    visible = [c for c in cards if c.visible]
    if not visible:
        st.warning("No votes to show.")
    for card in visible:
        render_card(card)


main()

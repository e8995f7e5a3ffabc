#!/usr/bin/env python3
"""
Philippine Inflation Calculator Dashboard
Restates a peso amount between years and shows average inflation by year

Run with:
    streamlit run inflation_calculator/app.py
"""

import logging
import streamlit as st
from datetime import datetime
import plotly.graph_objects as go

from inflation_calculator import config
from inflation_calculator.rate_table import RateTable, load_rate_table
from inflation_calculator.multiplier_engine import (
    MultiplierEngine,
    UnknownYearError,
    default_years,
    status_message,
    swap_years,
)
from inflation_calculator.yearly_deltas import (
    deltas_frame,
    grid_layout,
    split_latest,
    table_entries,
)
from inflation_calculator.formatting import (
    delta_direction,
    format_currency,
    format_delta,
    format_percent_change,
    format_rate,
)


# ==================== LOGGING SETUP ====================
def setup_logging():
    """Configure logging for the dashboard process"""
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format=config.LOG_FORMAT,
        handlers=[logging.StreamHandler()]
    )
    return logging.getLogger(__name__)

logger = setup_logging()

# Configure page
st.set_page_config(
    page_title=config.APP_NAME,
    page_icon="₱",
    layout="centered"
)

# =============================================================================
# DATA LOADING & CACHING
# =============================================================================

@st.cache_resource
def initialize_table():
    """Load the inflation rate table once per process"""
    try:
        return load_rate_table()
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"✗ Failed to load inflation data: {e}")
        st.error(f"Error loading inflation data: {e}")
        st.stop()

# =============================================================================
# CALCULATOR
# =============================================================================

def on_swap():
    st.session_state.from_year, st.session_state.to_year = swap_years(
        st.session_state.from_year, st.session_state.to_year
    )

def create_calculator(table: RateTable):
    """Amount/year inputs and the restated result"""
    years = table.years()

    if 'from_year' not in st.session_state or 'to_year' not in st.session_state:
        st.session_state.from_year, st.session_state.to_year = default_years(table)

    col1, col2 = st.columns([1, 1])
    with col1:
        st.selectbox("In", years, key="from_year", help="Year the amount is from")
    with col2:
        amount_input = st.text_input(
            "the goods you can buy for",
            value=config.DEFAULT_AMOUNT,
            key="amount_input",
            placeholder="e.g. 100.00"
        )

    col1, col2 = st.columns([2, 1])
    with col1:
        st.selectbox("At the end of", years, key="to_year")
    with col2:
        st.markdown("&nbsp;")
        st.button("🔄 Swap", on_click=on_swap, use_container_width=True)

    from_year = st.session_state.from_year
    to_year = st.session_state.to_year

    try:
        result = MultiplierEngine(table).compute(amount_input, from_year, to_year)
    except UnknownYearError as e:
        st.error(f"❌ {e}")
        return

    if result['success']:
        st.markdown(
            f"would roughly cost you **{format_currency(result['final_amount'])}** "
            f"({format_percent_change(result['percent_change'])})"
        )
    else:
        st.markdown(config.NO_RESULT_MESSAGE)
        if config.UNDEFINED_RESULT_MESSAGE in result['errors']:
            st.error(f"❌ {config.UNDEFINED_RESULT_MESSAGE}")

    message = status_message(amount_input, from_year, to_year)
    if message:
        st.warning(message)
    else:
        st.caption(config.DATA_SOURCE_NOTE)

# =============================================================================
# INFLATION TABLE
# =============================================================================

def display_latest(entry):
    delta = entry['delta']
    st.metric(
        f"📅 {entry['year']}",
        format_rate(entry['rate']),
        f"{delta:+.2f} compared to last year" if delta is not None else None,
        delta_color="inverse"
    )

def display_cell(entry):
    if entry is None:
        return

    direction = delta_direction(entry['delta'])
    color = {'increase': 'red', 'decrease': 'green'}.get(direction)
    delta_text = format_delta(entry['delta'])
    if color:
        delta_text = f":{color}[{delta_text}]"

    st.markdown(f"**{entry['year']}** &nbsp; {format_rate(entry['rate'])} &nbsp; {delta_text}")

def display_rate_chart(table: RateTable):
    """Bar chart of rates by year"""
    df = table.to_frame().dropna(subset=['Rate'])

    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=df['Year'],
        y=df['Rate'],
        name='Average inflation',
        marker_color='#1f77b4',
        hovertemplate='<b>%{x}</b><br>Inflation: %{y:.1f}%<extra></extra>'
    ))

    fig.update_layout(
        title='Average Annual Inflation',
        xaxis_title='Year',
        yaxis_title='Inflation (%)',
        template='plotly_white',
        height=350
    )

    st.plotly_chart(fig, use_container_width=True)

def create_inflation_table(table: RateTable):
    """Latest year on top, remaining years in a column-major grid"""
    entries = table_entries(table)
    latest, remaining = split_latest(entries)
    if latest is None:
        return

    st.markdown("## Average inflation by year")
    display_latest(latest)

    for row in grid_layout(remaining, config.GRID_COLUMNS):
        cols = st.columns(config.GRID_COLUMNS)
        for col, entry in zip(cols, row):
            with col:
                display_cell(entry)

    st.divider()
    display_rate_chart(table)

    with st.expander("📋 Raw data"):
        df = deltas_frame(table)
        st.dataframe(df, use_container_width=True, hide_index=True)

# =============================================================================
# MAIN APP
# =============================================================================

def main():
    st.title(config.APP_NAME)
    st.markdown(config.APP_DESCRIPTION)

    table = initialize_table()

    create_calculator(table)
    st.divider()
    create_inflation_table(table)

    # Footer
    st.markdown("---")
    st.markdown(
        f"""
        <div style='text-align: center; color: #999; font-size: 11px;'>
        {config.APP_NAME} v{config.APP_VERSION} | Data: {table.first_year}-{table.last_year} | Rendered: {datetime.now().strftime('%Y-%m-%d %H:%M')}
        </div>
        """,
        unsafe_allow_html=True
    )

if __name__ == "__main__":
    main()

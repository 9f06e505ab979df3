import datetime as dt
import logging

import streamlit as st

from energy_report import charts
from energy_report import config
from energy_report import report
from energy_report.analytics import derive_analytics
from energy_report.simulation import simulate_energy_day

logging.basicConfig(level=logging.INFO)

st.set_page_config(
    page_title="Daily Energy Report",
    layout="wide",
    initial_sidebar_state="expanded"
)
st.title("Daily Energy Report")


# Sidebar - report inputs
st.sidebar.header("Report Parameters")
building_name = st.sidebar.text_input("Building", value=config.DEFAULT_BUILDING_NAME)
report_date = st.sidebar.date_input("Date", value=dt.date.today())
seed = st.sidebar.number_input("Seed", value=config.DEFAULT_SEED, min_value=0, step=1)
price = st.sidebar.number_input("Price (CZK/kWh)", value=config.PRICE_CZK_PER_KWH, min_value=0.01, step=0.05)

day = simulate_energy_day(
    seed=int(seed),
    building_name=building_name,
    date=report_date,
    price_CZK_per_kWh=price,
)
analytics = derive_analytics(day.hourly_kWh)
summary = report.summarize_day(day, analytics)

st.subheader(f"{day.building_name} ({day.date.isoformat()})")
col1, col2, col3 = st.columns(3)
col1.metric("Total", f"{summary['total']:.1f} kWh")
col2.metric("Estimated cost", f"{summary['cost']:.0f} CZK", help=f"{summary['price']:.2f} CZK/kWh")
col3.metric("Peak", f"{summary['peak']:.1f} kWh", help=f"at {report.format_hour(summary['peak_hour'])}")

tab1, tab2, tab3 = st.tabs(["Timeline", "Breakdown", "Checklist"])

with tab1:
    st.plotly_chart(charts.hourly_figure(day, analytics), use_container_width=True)
    st.markdown(f"Average: **{analytics.average:.1f} kWh/h**")
    st.dataframe(report.top_hours_frame(day, analytics), hide_index=True)

with tab2:
    left, right = st.columns(2)
    with left:
        st.plotly_chart(charts.consumers_figure(day), use_container_width=True)
    with right:
        st.plotly_chart(charts.categories_figure(day), use_container_width=True)

with tab3:
    for alert in analytics.alerts:
        if alert.ok:
            st.success(alert.label)
        else:
            st.error(alert.label)

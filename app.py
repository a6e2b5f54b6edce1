"""Streamlit entry point for the livestock metrics dashboard.

This script sets up logging and the session state and displays a landing
page.  The inputs and outputs are implemented in separate files under the
`pages/` directory.
"""

import logging
import streamlit as st

from livestock_metrics import ProjectParameters, compute_metrics
from livestock_metrics.reference import is_buffalo

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

st.set_page_config(page_title="Livestock Metrics Dashboard", layout="wide")


def main() -> None:
    # --- SESSION SETUP ------------------------------------------------------
    if "params" not in st.session_state:
        st.session_state.params = ProjectParameters()
    params: ProjectParameters = st.session_state.params

    # --- SIDEBAR: ACTIVE HERD ----------------------------------------------
    additive = f"{params.additive_efficiency_percent:g} %" if params.use_emission_reduction_additive else "none"
    st.sidebar.markdown("### Active herd")
    st.sidebar.markdown(
        f"""
        - **Animals:** {params.herd_size:,} × {params.animal_type} / {params.subtype}
        - **Feed:** {params.feed_type}, **diet:** {params.dietary_profile}
        - **Supplementation:** {params.supplementation_type}
        - **Additive:** {additive}
        - **Horizon:** {params.project_years} years
        """
    )
    st.sidebar.markdown(
        """
        **Next step:**
        Go to **Herd Inputs** (page menu) to configure the herd and management
        practices, then open the Emissions, Reproduction and Energy pages.
        """
    )

    # --- MAIN PAGE ----------------------------------------------------------
    st.title("Livestock Emissions, Reproduction & Energy Dashboard")

    col1, col2 = st.columns([2, 1])

    with col1:
        st.subheader("From herd management to emissions and productivity")
        st.markdown(
            """
            This dashboard models how **feed, diet, supplementation and
            methane-reducing additives** change the emissions intensity and the
            reproductive output of a cattle or buffalo herd.

            - **Emissions:** baseline vs improved intensity (kg CO₂e/head/year),
              herd totals and a split by enteric fermentation, manure management
              and feed production
            - **Reproduction:** calving rate and calving interval, and the
              additional calves produced over the project
            - **Energy:** daily energy intake, methane conversion factor (Ym),
              feed conversion efficiency and how emissions respond to energy intake
            """
        )
        st.caption(
            "The formulas are illustrative engineering approximations, not a "
            "tier-3 GHG inventory."
        )

    with col2:
        result = compute_metrics(params)
        em = result.emissions
        st.metric(
            label="Emissions intensity (kg CO₂e/head/yr)",
            value=f"{em.adjusted_emissions_intensity:,.1f}",
            delta=f"-{em.reduction_percent:.1f} %",
            delta_color="inverse",
        )
        st.metric(label="Herd emissions avoided (t CO₂e/yr)", value=f"{em.annual_reduction:,.1f}")
        st.metric(
            label="Improved calving rate",
            value=f"{result.reproduction.improved_calving_rate:.1f} %",
            delta=f"+{result.reproduction.calving_rate_improvement:.1f} pts",
        )
        st.caption(
            "Buffalo coefficients in use." if is_buffalo(params.animal_type) else "Cattle coefficients in use."
        )


if __name__ == "__main__":
    main()

import streamlit as st
import pandas as pd
import plotly.graph_objects as go
import plotly.express as px

from simulator import Simulator
from workload import SCENARIO_RATIO_BANDS, generate_workload
from visualization import render_ascii_chart

st.set_page_config(
    page_title="EDF + DVFS Energy Scheduler",
    page_icon="⚡",
    layout="wide",
    initial_sidebar_state="expanded"
)

st.markdown("""
<style>
    .main-header {
        font-size: 2.5rem;
        font-weight: bold;
        color: #1f77b4;
        text-align: center;
        margin-bottom: 2rem;
    }
</style>
""", unsafe_allow_html=True)

st.markdown('<h1 class="main-header">Energy-Aware EDF Scheduling with DVFS</h1>', unsafe_allow_html=True)

with st.sidebar:
    st.header("🔧 Configuration")
    scenario = st.selectbox(
        "Workload Type:",
        sorted(SCENARIO_RATIO_BANDS),
        index=sorted(SCENARIO_RATIO_BANDS).index("mixed"),
        help="Band of burst/deadline ratios to draw tasks from"
    )
    num_tasks = st.slider("Number of Tasks", 1, 50, 8)
    seed = st.number_input("Random Seed", value=42, help="Seed for reproducible batches")

    st.markdown("---")
    st.markdown("### Frequency ladder")
    st.markdown("- **800 MHz**: burst/deadline < 0.3")
    st.markdown("- **1200 MHz**: 0.3 ≤ ratio < 0.7")
    st.markdown("- **1800 MHz**: ratio ≥ 0.7")

if st.button("Start Simulation", type="primary", key="run_btn"):
    st.session_state.run_simulation = True

if st.session_state.get('run_simulation', False):
    st.session_state.run_simulation = False

    tasks = generate_workload(scenario, num_tasks=num_tasks, seed=int(seed))
    sim = Simulator()
    trace = sim.run(tasks)
    result = sim.evaluate()
    df = trace.to_dataframe()

    st.success("✅ Simulation completed!")

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Total Energy", f"{result['total_energy']:.6f} J")
    col2.metric("Makespan", f"{result['makespan']:.3f} s")
    col3.metric("Avg Power", f"{result['avg_power']:.6f} W")
    col4.metric("Avg Frequency", f"{result['avg_frequency']:.0f} MHz")

    st.subheader("📈 Cumulative Energy")
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=[0.0] + list(trace.times),
        y=[0.0] + list(trace.energies),
        mode="lines+markers",
        line_shape="hv",
        name="Cumulative energy",
    ))
    fig.update_layout(xaxis_title="Simulated time (s)", yaxis_title="Energy (J)", height=400)
    st.plotly_chart(fig, use_container_width=True)

    st.subheader("⚡ Energy per Task")
    df_energy = df.assign(task=df["task_id"].astype(str), frequency_mhz=df["frequency"].astype(str))
    fig_energy = px.bar(
        df_energy, x="task", y="task_energy", color="frequency_mhz",
        labels={"task": "Task", "task_energy": "Energy (J)", "frequency_mhz": "Frequency (MHz)"},
    )
    st.plotly_chart(fig_energy, use_container_width=True)

    st.subheader("📅 Execution Timeline")
    fig_gantt = go.Figure()
    for _, row in df.iterrows():
        fig_gantt.add_trace(go.Bar(
            name=f"Task {row['task_id']}",
            x=[row['end_time'] - row['start_time']],
            y=[f"{row['frequency']} MHz"],
            orientation='h',
            base=row['start_time'],
            hovertemplate=f"Task: {row['task_id']}<br>" +
                        f"Start: {row['start_time']:.3f}s<br>" +
                        f"End: {row['end_time']:.3f}s<br>" +
                        f"Deadline: {row['deadline']} ms<extra></extra>"
        ))
    fig_gantt.update_layout(
        xaxis_title="Simulated time (s)",
        yaxis_title="CPU frequency",
        height=350,
        showlegend=False,
        barmode='stack'
    )
    st.plotly_chart(fig_gantt, use_container_width=True)

    st.subheader("🗒️ Execution Records")
    st.dataframe(df, use_container_width=True)

    st.subheader("Frequency Usage")
    st.dataframe(pd.DataFrame(
        sorted(result["frequency_histogram"].items()), columns=["Frequency (MHz)", "Tasks"]
    ))

    with st.expander("ASCII chart"):
        st.code(render_ascii_chart(trace))

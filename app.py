import logging

import streamlit as st
import pandas as pd
import numpy as np
import plotly.express as px
import plotly.graph_objects as go

from algorithms.expression import MalformedExpressionError, evaluate
from components.benchmark import (
    COMBINATORIAL, SEARCHES, SORTS, STACKS, BenchConfig, Case,
    fit_growth, run_benchmark, stack_resize_profile, time_call,
)
from components.work_loads.array_generator import ORDERS
from components.work_loads.expression_generator import token_count
from components.workload import WorkLoad

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

# Configure page
st.set_page_config(
    page_title="AlgoBench",
    page_icon="📈",
    layout="wide",
    initial_sidebar_state="expanded"
)

# Main title
st.title("📈 AlgoBench: Complexity in Practice")
st.markdown("---")

# Sidebar
with st.sidebar:
    st.header("Navigation")
    page = st.selectbox(
        "Choose a section:",
        ["Home", "Sorting & Searching", "Combinatorial Search", "Stacks", "Expressions"]
    )

    st.markdown("---")
    st.subheader("Workload")
    seed = st.number_input("Seed", min_value=0, value=42, step=1)
    repeats = st.slider("Repeats per size", min_value=1, max_value=10, value=3)
    if st.button("🔄 Rerun"):
        st.rerun()


def plot_timings(df, log_axes=True, title="Running time vs input size"):
    fig = px.line(df, x="n", y="seconds", color="algorithm", markers=True, title=title,
                  log_x=log_axes, log_y=log_axes)
    fig.update_layout(xaxis_title="n", yaxis_title="seconds (best of repeats)")
    st.plotly_chart(fig, use_container_width=True)


def show_growth(df, registry):
    growth = fit_growth(df)
    if growth.empty:
        st.info("Need at least two sizes to estimate growth")
        return
    growth["expected"] = growth["algorithm"].map(lambda name: registry[name].complexity)
    st.write("**Fitted exponent k in seconds ≈ c·nᵏ:**")
    st.dataframe(growth[["algorithm", "expected", "exponent"]].round(2))


# Main content area
if page == "Home":
    st.header("Welcome to AlgoBench")

    st.markdown("""
    Measure the textbook algorithms against their claimed complexity classes:

    **Sections:**
    - 🔢 Insertion sort, both merge sorts, linear and binary search
    - 🧮 Brute-force triple-sum (Θ(n³)) and subset-sum (Θ(2ⁿ))
    - 📚 Linked vs array-backed stacks, and the amortized cost of resizing
    - 🧾 The two-stack arithmetic expression evaluator
    """)

    col1, col2, col3, col4 = st.columns(4)

    with col1:
        st.metric("Sorts", len(SORTS))

    with col2:
        st.metric("Searches", len(SEARCHES))

    with col3:
        st.metric("Stack backings", len(STACKS))

    with col4:
        st.metric("Brute-force searches", len(COMBINATORIAL))

elif page == "Sorting & Searching":
    st.header("🔢 Sorting & Searching")

    registry = {**SORTS, **SEARCHES}
    names = st.multiselect("Algorithms", list(registry), default=list(registry))
    order = st.selectbox("Input order", ORDERS)
    sizes = st.multiselect("Sizes", [100, 250, 500, 1000, 2000, 4000], default=[250, 500, 1000, 2000])

    if names and sizes:
        try:
            config = BenchConfig(sizes=sorted(sizes), repeats=repeats, order=order, seed=seed)
            df = run_benchmark(names, config, registry)
        except ValueError as e:
            st.error(f"❌ {e}")
        else:
            plot_timings(df)
            show_growth(df, registry)
            with st.expander("Raw timings"):
                st.dataframe(df.pivot(index="n", columns="algorithm", values="seconds"))
    else:
        st.info("👆 Pick at least one algorithm and one size")

elif page == "Combinatorial Search":
    st.header("🧮 Combinatorial Search")
    st.markdown("Inputs are shifted to positive values so no combination sums to zero: "
                "both searches have to exhaust every candidate.")

    tab1, tab2 = st.tabs(["Triple sum", "Subset sum"])

    with tab1:
        max_n = st.slider("Largest n", min_value=20, max_value=200, value=100, step=20, key="triple_n")
        sizes = list(range(max_n // 5, max_n + 1, max_n // 5))
        df = run_benchmark(["triple sum"], BenchConfig(sizes=sizes, repeats=repeats, seed=seed))
        plot_timings(df, title="Triple sum")
        show_growth(df, COMBINATORIAL)

    with tab2:
        max_n = st.slider("Largest n", min_value=8, max_value=20, value=16, key="subset_n")
        sizes = list(range(4, max_n + 1, 2))
        df = run_benchmark(["subset sum"], BenchConfig(sizes=sizes, repeats=repeats, seed=seed))
        fig = px.line(df, x="n", y="seconds", markers=True, log_y=True, title="Subset sum (log y)")
        st.plotly_chart(fig, use_container_width=True)
        st.caption("A straight line on a log-y axis means exponential growth.")

elif page == "Stacks":
    st.header("📚 Stacks")

    sizes = st.multiselect("Sizes", [1000, 5000, 10000, 50000, 100000], default=[1000, 10000, 100000])
    if sizes:
        df = run_benchmark(list(STACKS), BenchConfig(sizes=sorted(sizes), repeats=repeats, seed=seed), STACKS)
        plot_timings(df, title="n pushes followed by n pops")

    st.subheader("Amortized resizing")
    num_ops = st.slider("Pushes (then as many pops)", min_value=8, max_value=1024, value=128)
    profile = stack_resize_profile(num_ops)

    fig = go.Figure()
    fig.add_trace(go.Bar(x=profile["op_index"], y=profile["copies"], name="copies in this op"))
    fig.add_trace(go.Scatter(x=profile["op_index"], y=profile["cumulative_copies"],
                             mode="lines", name="cumulative copies"))
    fig.add_trace(go.Scatter(x=profile["op_index"], y=3 * profile["op_index"],
                             mode="lines", line=dict(dash="dash"), name="3 · ops"))
    fig.update_layout(title="ArrayStack element copies", xaxis_title="operation", yaxis_title="copies")
    st.plotly_chart(fig, use_container_width=True)

    fig_cap = px.line(profile, x="op_index", y=["size", "capacity"], title="Size vs capacity")
    st.plotly_chart(fig_cap, use_container_width=True)

elif page == "Expressions":
    st.header("🧾 Expression Evaluator")

    expression = st.text_input("Expression (space separated tokens)", "( ( 2 * ( 3 + 5 ) ) / 4 )")
    if expression:
        try:
            st.success(f"✅ {expression} = {evaluate(expression)}")
        except MalformedExpressionError as e:
            st.error(f"❌ Malformed expression: {str(e)}")

    st.subheader("Evaluation time vs expression size")
    max_depth = st.slider("Max depth", min_value=2, max_value=12, value=8)
    workload = WorkLoad(seed)
    case = Case(evaluate, prepare=lambda e: (e,), complexity="Θ(n)")
    rows = []
    for depth in range(1, max_depth + 1):
        for expr in workload.expressions(5, depth=depth):
            rows.append({"tokens": token_count(expr), "seconds": time_call(case, expr, repeats)})
    df = pd.DataFrame(rows)

    fig = px.scatter(df, x="tokens", y="seconds", title="evaluate() is linear in token count")
    if len(df) > 1:
        slope, intercept = np.polyfit(df["tokens"], df["seconds"], 1)
        xs = np.linspace(df["tokens"].min(), df["tokens"].max(), 50)
        fig.add_trace(go.Scatter(x=xs, y=slope * xs + intercept, mode="lines", name="linear fit"))
    st.plotly_chart(fig, use_container_width=True)

    with st.expander("Sample expressions"):
        for expr in workload.expressions(3, depth=3):
            st.code(expr)

# Footer
st.markdown("---")
st.markdown(
    """
    <div style='text-align: center; color: #B0B0B0; padding: 1rem;'>
        Built with Streamlit 🚀 | AlgoBench
    </div>
    """,
    unsafe_allow_html=True
)

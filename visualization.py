import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

CHART_WIDTH = 50


def render_ascii_chart(trace, width=CHART_WIDTH):
    """Text table of (time, cumulative energy) followed by a bar per sample."""
    times, energies = trace.times, trace.energies
    if not energies:
        raise ValueError("Cannot render an energy chart for an empty trace")

    lines = ["Energy Consumption Over Time:", "Time (s)\tEnergy (J)", "-" * 28]
    for t, e in zip(times, energies):
        lines.append(f"{t:.2f}\t\t{e:.6f}")

    max_energy = max(energies)
    lines.append("")
    lines.append("Simple ASCII Chart:")
    for t, e in zip(times, energies):
        bar_length = round((e / max_energy) * width) if max_energy > 0 else 0
        lines.append(f"{t:.2f}s |{'#' * bar_length} {e:.6f} J")
    return "\n".join(lines)


def plot_energy_consumption(trace, path, title="Energy Consumption Over Time"):
    times, energies = trace.as_arrays()
    fig, ax = plt.subplots(figsize=(8, 4))
    # Energy is flat at zero until the first task completes
    ax.step([0.0, *times], [0.0, *energies], where="post", marker="o")
    for record, t, e in zip(trace.records, times, energies):
        ax.annotate(f"T{record.task_id}", (t, e), textcoords="offset points", xytext=(0, 6), ha="center")
    ax.set_xlabel("Simulated time (s)")
    ax.set_ylabel("Cumulative energy (J)")
    ax.set_title(title)
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)
    return path

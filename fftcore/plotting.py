"""
Python tool for plotting the spectra and benchmark timings
saved by fftcore in HDF5 files.
"""

import argparse
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict

import matplotlib.pyplot as plt
import numpy as np

from .data.paths import get_user_paths
from .data.store import load_benchmark, load_spectrum


@dataclass
class PlotConfiguration:
    """Plot style configuration."""

    colors1d: Dict[str, str] = field(
        default_factory=lambda: {
            "blue_white": "#0066CC",  # Dark Blue
            "green_white": "#007F00",  # Olive green
            "magenta_white": "#CC00CC",  # Shiny magenta
            "yellow_white": "#CC9900",  # Brownish yellow
        }
    )

    def __post_init__(self):
        """Customize figure styling."""
        plt.style.use("default")

        plt.rcParams.update(
            {
                "figure.figsize": (13, 7),
                "axes.grid": True,
                "axes.linewidth": 0.8,
                "lines.linewidth": 1.5,
                "font.family": "serif",
                "font.size": 10,
                "axes.labelsize": 11,
                "axes.titlesize": 12,
                "legend.framealpha": 0.8,
                "legend.loc": "upper left",
            }
        )

    def cycle(self):
        return list(self.colors1d.values())


def plot_spectrum(data, save_dir, config=None):
    """Plot input samples and transform magnitude."""
    config = config or PlotConfiguration()
    colors = config.cycle()

    signal = data["signal"]
    spectrum = data["spectrum"]
    index = np.arange(data["length"])

    fig, (ax1, ax2) = plt.subplots(2, 1)

    ax1.plot(index, signal.real, color=colors[0], label="Re")
    ax1.plot(index, signal.imag, color=colors[1], label="Im")
    ax1.set(xlabel="Sample index", ylabel="Amplitude")
    ax1.set_title("Input samples")
    ax1.legend()

    ax2.vlines(index, 0.0, np.abs(spectrum), color=colors[2])
    ax2.set(xlabel="Bin index", ylabel="Magnitude")
    ax2.set_title(
        f"{data['direction'].capitalize()} transform "
        f"(n = {data['length']}, {data['algorithm']})"
    )

    fig.tight_layout()
    save_path = Path(save_dir) / "spectrum.png"
    plt.savefig(save_path)
    plt.close(fig)

    return save_path


def plot_benchmark(data, save_dir, config=None):
    """Plot mean execution time against size, one figure per group."""
    config = config or PlotConfiguration()
    colors = config.cycle()
    saved = []

    for group_name, cases in data.items():
        fig, ax = plt.subplots()
        for color_idx, (case_name, case) in enumerate(cases.items()):
            ax.errorbar(
                case["size"],
                1e6 * case["mean_s"],
                yerr=1e6 * case["std_s"],
                marker="o",
                capsize=3,
                color=colors[color_idx % len(colors)],
                label=case_name,
            )

        if len(np.unique(np.concatenate([c["size"] for c in cases.values()]))) > 1:
            ax.set_xscale("log", base=2)
            ax.set_yscale("log")
        ax.set(xlabel="Transform length", ylabel=r"Mean time [$\mu$s]")
        ax.set_title(group_name.replace("_", " ").capitalize())
        ax.legend()

        save_path = Path(save_dir) / f"benchmark_{group_name}.png"
        plt.savefig(save_path)
        plt.close(fig)
        saved.append(save_path)

    return saved


def main(argv=None):
    """Main function."""
    parser = argparse.ArgumentParser(description="Plot fftcore results.")
    parser.add_argument(
        "--base-dir",
        default=None,
        help="Directory holding the HDF5 files (default: $FFTCORE_BASE_DIR or ./results)",
    )
    args = parser.parse_args(argv)

    paths = get_user_paths(args.base_dir, create=True)
    base_dir = paths["base_dir"]
    fig_dir = paths["fig_dir"]
    print(f"Saving figures to directory: {fig_dir}")

    config = PlotConfiguration()
    found = False

    spectrum_file = base_dir / "fftcore_spectrum.h5"
    if spectrum_file.exists():
        print(f"Loading data from file: {spectrum_file}")
        plot_spectrum(load_spectrum(spectrum_file), fig_dir, config)
        found = True

    benchmark_file = base_dir / "fftcore_benchmark.h5"
    if benchmark_file.exists():
        print(f"Loading data from file: {benchmark_file}")
        plot_benchmark(load_benchmark(benchmark_file), fig_dir, config)
        found = True

    if not found:
        print(f"No fftcore result files found in {base_dir}")


if __name__ == "__main__":
    main()

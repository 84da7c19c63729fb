"""Plot queue sort timings against an n log n reference."""

import argparse
import logging
from pathlib import Path

import matplotlib as mpl
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd


def n_log_n_reference(sizes: np.ndarray, seconds: np.ndarray) -> np.ndarray:
    """Scale n log n so that it passes through the largest measurement."""
    growth = sizes * np.log2(sizes)
    return growth * (seconds[-1] / growth[-1])


def main(input_file: Path, output: Path) -> None:
    df = pd.read_csv(input_file, sep="\t").sort_values("Size")
    if df.empty:
        raise ValueError(f"No timings in {input_file}")
    logging.info("Loaded %d sizes from %s", len(df), input_file)

    sizes = df["Size"].to_numpy(dtype=float)
    means = df["Mean seconds"].to_numpy(dtype=float)
    stds = df["Std seconds"].to_numpy(dtype=float)

    plt.figure(figsize=(3, 2.5))
    ax = plt.gca()
    ax.errorbar(sizes, means, yerr=stds, marker="o", capsize=2, label="sort")
    linewidth = mpl.rcParams["xtick.major.width"]
    ax.plot(
        sizes,
        n_log_n_reference(sizes, means),
        color="black",
        linestyle="--",
        linewidth=linewidth,
        label=r"$n \log n$",
    )
    ax.set_xscale("log")
    ax.set_yscale("log")
    ax.set_xlabel("Queue size $n$")
    ax.set_ylabel("Seconds")
    ax.legend()

    plt.savefig(output, bbox_inches="tight", dpi=300)
    plt.clf()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    parser = argparse.ArgumentParser()
    parser.add_argument("input", type=Path, help="Timing log from time_sort")
    parser.add_argument("output", type=Path)
    args = parser.parse_args()
    main(args.input, args.output)

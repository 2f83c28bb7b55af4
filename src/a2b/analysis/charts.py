#!/usr/bin/env python3
"""
Cash Flow Chart Rendering

Renders per-period inflows, outflows and net as a bar chart image.
"""

import logging
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

import matplotlib

matplotlib.use("Agg")  # Use non-interactive backend

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402

from ..core.models import PeriodBucket  # noqa: E402

logger = logging.getLogger(__name__)


def generate_cash_flow_chart(
    buckets: Sequence[PeriodBucket],
    output_dir: Path,
    title: str = "Cash Flow",
    figure_size: tuple[int, int] = (12, 6),
    dpi: int = 150,
    output_format: str = "png",
) -> Path:
    """
    Draw inflow/outflow bars and a net line for each period.

    Returns:
        Path to the generated image

    Raises:
        ValueError: If there are no periods to plot
    """
    if not buckets:
        raise ValueError("No cash flow periods to chart")

    output_dir.mkdir(parents=True, exist_ok=True)

    labels = [bucket.display_string for bucket in buckets]
    inflows = np.array([float(bucket.inflows) for bucket in buckets])
    outflows = np.array([float(bucket.outflows) for bucket in buckets])
    net = inflows - outflows
    x = np.arange(len(buckets))
    width = 0.4

    fig, ax = plt.subplots(figsize=figure_size)
    ax.bar(x - width / 2, inflows, width, color="#6A994E", alpha=0.8, label="Inflows")
    ax.bar(x + width / 2, outflows, width, color="#BC4749", alpha=0.8, label="Outflows")
    ax.plot(x, net, color="#2E86AB", marker="o", linewidth=2, label="Net")
    ax.axhline(y=0, color="black", linestyle="-", linewidth=0.5)

    ax.set_title(title, fontsize=12, fontweight="bold")
    ax.set_ylabel("Amount ($)", fontsize=10)
    ax.set_xticks(x)
    ax.set_xticklabels(labels, rotation=45, ha="right", fontsize=8)
    ax.legend(loc="best", fontsize=8)
    ax.grid(True, alpha=0.3, axis="y")
    ax.yaxis.set_major_formatter(plt.FuncFormatter(lambda v, p: f"${v:,.0f}"))
    fig.tight_layout()

    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    slug = title.lower().replace(" ", "_")
    output_file = output_dir / f"{timestamp}_{slug}.{output_format}"

    fig.savefig(output_file, dpi=dpi, bbox_inches="tight")
    plt.close(fig)

    logger.info("Saved cash flow chart with %d periods to %s", len(buckets), output_file)
    return output_file

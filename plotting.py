import math
import numbers
import os

import matplotlib
import matplotlib.pyplot as plt

from number_words import InvalidArgumentError, numbers_to_words


matplotlib.use("Agg")


def word_length_counts(words):
    counts = {}
    for spelled in words:
        counts[len(spelled)] = counts.get(len(spelled), 0) + 1
    items = sorted(counts.items())
    labels = [str(item[0]) for item in items]
    values = [item[1] for item in items]
    return labels, values


def _check_bar_inputs(labels, values, title):
    if not labels:
        raise InvalidArgumentError("bar plot needs at least one label.")
    if len(labels) != len(values):
        raise InvalidArgumentError(
            f"got {len(labels)} labels but {len(values)} values."
        )
    for value in values:
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise InvalidArgumentError(f"bar values must be numeric, got {value!r}.")
        if not math.isfinite(value):
            raise InvalidArgumentError(f"bar values must be finite, got {value}.")
        if value < 0:
            raise InvalidArgumentError(f"bar values must not be negative, got {value}.")
    if not title or not str(title).strip():
        raise InvalidArgumentError("bar plot needs a title.")


def bar_plot(labels, values, title, output_path, ylabel="count"):
    """Validate the inputs, then save a bar chart PNG to ``output_path``."""
    _check_bar_inputs(labels, values, title)
    fig_width = max(8, len(labels) * 0.35)
    fig, ax = plt.subplots(figsize=(fig_width, 4))
    try:
        ax.bar(range(len(values)), values, color="#3b82f6")
        ax.set_title(title)
        ax.set_ylabel(ylabel)
        ax.set_xticks(range(len(labels)))
        ax.set_xticklabels([str(label) for label in labels], rotation=45, ha="right", fontsize=8)
        ax.grid(axis="y", linestyle="--", alpha=0.4)
        fig.tight_layout()
        directory = os.path.dirname(output_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        fig.savefig(output_path)
    finally:
        plt.close(fig)
    return output_path


def plot_word_lengths(values, output_path, capitalize=False):
    words = numbers_to_words(values, capitalize=capitalize)
    labels, counts = word_length_counts(words)
    return bar_plot(
        labels,
        counts,
        f"Word lengths for {len(words)} numbers",
        output_path,
    )

"""
Chart samplers.

Samples a named function over an x range. The ``binary`` function keeps a
running 0/1 state that flips with a small probability per sample, so the
series reads as a digital signal with contiguous blocks rather than noise.
That state lives only for the duration of one ``sample_function`` call.
"""

from __future__ import annotations

import math
import random

from ..ir import ChartColor, ChartFn, ChartPoint, ChartProps, ChartSeries

DEFAULT_RANGE = (0.0, 10.0)
DEFAULT_SAMPLES = 20
BINARY_SWITCH_PROBABILITY = 0.15

# Color cycle for multi-line charts and multi-series point clouds
DEFAULT_COLORS: tuple[ChartColor, ...] = (
    ChartColor.BLUE,
    ChartColor.GREEN,
    ChartColor.ORANGE,
    ChartColor.PURPLE,
    ChartColor.RED,
    ChartColor.TEAL,
)


def sample_function(
    fn: ChartFn | None,
    x_range: tuple[float, float] = DEFAULT_RANGE,
    samples: int = DEFAULT_SAMPLES,
    noise: float = 0.0,
    rng: random.Random | None = None,
) -> list[ChartPoint]:
    """
    Sample ``fn`` at ``samples`` evenly spaced x values.

    Args:
        fn: Function name; ``None`` samples a flat zero line
        x_range: ``(x_min, x_max)``, inclusive at both ends
        samples: Number of points; fewer than 2 collapses to ``x_min``
        noise: Amplitude of additive uniform noise in ``[-noise, noise]``
        rng: Random source (module-level source if omitted)

    Returns:
        List of chart points

    Examples:
        >>> [p.y for p in sample_function(ChartFn.LINEAR, (0, 2), 3)]
        [0.0, 1.0, 2.0]
    """
    if samples <= 0:
        return []

    source = rng or random
    x_min, x_max = float(x_range[0]), float(x_range[1])
    step = (x_max - x_min) / (samples - 1) if samples > 1 else 0.0

    binary_state = 0
    if fn == ChartFn.BINARY:
        binary_state = 1 if source.random() > 0.5 else 0

    data: list[ChartPoint] = []

    for i in range(samples):
        x = x_min + i * step

        if fn == ChartFn.SIN:
            y = math.sin(x)
        elif fn == ChartFn.COS:
            y = math.cos(x)
        elif fn == ChartFn.TAN:
            y = math.tan(x)
        elif fn == ChartFn.SQUARE:
            y = x * x
        elif fn == ChartFn.SQRT:
            y = math.sqrt(abs(x))
        elif fn == ChartFn.LINEAR:
            y = x
        elif fn == ChartFn.RANDOM:
            y = source.random() * 2 - 1
        elif fn == ChartFn.BINARY:
            if source.random() < BINARY_SWITCH_PROBABILITY:
                binary_state = 1 - binary_state
            y = float(binary_state)
        else:
            y = 0.0

        if noise > 0:
            y += (source.random() - 0.5) * 2 * noise

        if not math.isfinite(y):
            y = 0.0

        data.append(ChartPoint(x=x, y=y))

    return data


def build_chart_series(props: ChartProps, rng: random.Random | None = None) -> list[ChartSeries]:
    """
    Resolve the series of a Chart node.

    Multi-line mode (``lines``) cycles through ``DEFAULT_COLORS`` for lines
    without an explicit color. Single-line mode (``fn``) is always blue.
    """
    x_range = props.range
    samples = props.samples or DEFAULT_SAMPLES

    if props.lines:
        return [
            ChartSeries(
                data=sample_function(line.fn, x_range, samples, line.noise or 0, rng),
                label=line.label,
                color=line.color or DEFAULT_COLORS[index % len(DEFAULT_COLORS)],
                scatter=line.scatter,
            )
            for index, line in enumerate(props.lines)
        ]

    if props.fn is not None:
        return [
            ChartSeries(
                data=sample_function(props.fn, x_range, samples, props.noise or 0, rng),
                color=ChartColor.BLUE,
                scatter=props.scatter,
            )
        ]

    return []


__all__ = [
    "DEFAULT_RANGE",
    "DEFAULT_SAMPLES",
    "DEFAULT_COLORS",
    "BINARY_SWITCH_PROBABILITY",
    "sample_function",
    "build_chart_series",
]

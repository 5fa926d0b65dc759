from __future__ import annotations

from decimal import Decimal
import unittest

import numpy as np

from quickplot import DimensionMismatch, Figure, FigureBuilder, PlotDataError, Series
from quickplot.adapters.normalize import normalize_xy
from quickplot.figure import COLOR_PALETTES
from quickplot.styles import Curve, FigureKind, Marker, MarkerShape, Stroke, Style, parse_style


class StyleModelTests(unittest.TestCase):
    def test_defaults(self) -> None:
        style = Style()
        self.assertIs(style.kind, FigureKind.NORMAL)
        self.assertIsNone(style.color)
        self.assertEqual(Marker(), Marker(MarkerShape.CIRCLE, 4, True))
        self.assertEqual(Stroke(), Stroke(Curve.SMOOTH, 0, False))

    def test_enum_values_accept_strings(self) -> None:
        self.assertIs(Marker("square").shape, MarkerShape.SQUARE)
        self.assertIs(Stroke("stepline").curve, Curve.STEPLINE)
        self.assertIs(Style(kind="column").kind, FigureKind.COLUMN)

    def test_invalid_values_are_programming_errors(self) -> None:
        with self.assertRaises(ValueError):
            Marker("triangle")
        with self.assertRaises(ValueError):
            Stroke("zigzag")
        with self.assertRaises(ValueError):
            Marker(size=-1)
        with self.assertRaises(ValueError):
            Stroke(width=-2)
        with self.assertRaises(ValueError):
            Style(kind="pie")
        with self.assertRaises(ValueError):
            Style(color="not-a-color")

    def test_with_helpers_return_new_values(self) -> None:
        base = Style(color="red")
        marked = base.with_marker(("circle", 10, True)).with_stroke(("smooth", 4, False))
        self.assertIsNone(base.marker)
        self.assertEqual(marked, parse_style("r.10~4"))
        self.assertEqual(marked.with_kind(FigureKind.AREA), parse_style("@r.10~4"))
        self.assertIsNone(marked.with_marker(None).marker)

    def test_constructor_coerces_marker_and_stroke_tuples(self) -> None:
        style = Style(color="red", marker=("circle", 10, True), stroke=("smooth", 4, False))
        self.assertIsInstance(style.marker, Marker)
        self.assertIsInstance(style.stroke, Stroke)
        self.assertEqual(style, parse_style("r.10~4"))
        self.assertEqual(str(style), "r.10~4")

    def test_constructor_rejects_invalid_marker_and_stroke(self) -> None:
        with self.assertRaises(ValueError):
            Style(color="red", marker="circle")  # type: ignore[arg-type]
        with self.assertRaises(ValueError):
            Style(color="red", stroke=4)  # type: ignore[arg-type]
        with self.assertRaises(ValueError):
            Style(color="red", marker=("circle", 1, True, "extra"))  # type: ignore[arg-type]
        with self.assertRaises(ValueError):
            Style().with_stroke(("zigzag", 1, False))

    def test_style_is_immutable(self) -> None:
        style = Style(color="red")
        with self.assertRaises(AttributeError):
            style.color = "blue"  # type: ignore[misc]

    def test_style_parse_alias(self) -> None:
        self.assertEqual(Style.parse("b,2"), parse_style("b,2"))


class NormalizeTests(unittest.TestCase):
    def test_normalize_decimal_and_none(self) -> None:
        x, y = normalize_xy([Decimal("1.5"), Decimal("2.25"), None, Decimal("3.5")])
        self.assertEqual(x.tolist(), [0.0, 1.0, 2.0, 3.0])
        self.assertEqual(y[:2].tolist(), [1.5, 2.25])
        self.assertTrue(np.isnan(y[2]))

    def test_normalize_copies_and_freezes(self) -> None:
        source = np.asarray([1.0, 2.0, 3.0])
        _, y = normalize_xy(source)
        source[0] = 99.0
        self.assertEqual(y[0], 1.0)
        self.assertFalse(y.flags.writeable)

    def test_normalize_rejects_bad_input(self) -> None:
        with self.assertRaises(PlotDataError):
            normalize_xy(None)
        with self.assertRaises(PlotDataError):
            normalize_xy(np.zeros((2, 2)))
        with self.assertRaises(PlotDataError):
            normalize_xy([[1, 2], [3, 4]])
        with self.assertRaises(PlotDataError):
            normalize_xy(["1", "2"])
        with self.assertRaises(PlotDataError):
            normalize_xy("123")

    def test_normalize_torch_tensor(self) -> None:
        try:
            import torch
        except Exception:
            self.skipTest("torch is not installed")

        _, y = normalize_xy(torch.tensor([1, 2, 3], dtype=torch.int64))
        self.assertEqual(y.dtype, np.float64)
        self.assertEqual(y.tolist(), [1.0, 2.0, 3.0])

    def test_normalize_pandas_dataframe_single_numeric_column(self) -> None:
        try:
            import pandas as pd
        except Exception:
            self.skipTest("pandas is not installed")

        df = pd.DataFrame({"label": ["a", "b", "c"], "value": [1, 2, 3]})
        _, y = normalize_xy(df)
        self.assertEqual(y.tolist(), [1.0, 2.0, 3.0])
        x, _ = normalize_xy(df["value"], x=pd.Series([10, 20, 30]))
        self.assertEqual(x.tolist(), [10.0, 20.0, 30.0])


class SeriesTests(unittest.TestCase):
    def test_dimension_mismatch_reports_both_lengths(self) -> None:
        with self.assertRaises(DimensionMismatch) as ctx:
            Series.new([1, 2, 3], [1, 2])
        self.assertEqual((ctx.exception.x_len, ctx.exception.y_len), (3, 2))
        self.assertIsInstance(ctx.exception, PlotDataError)

    def test_implicit_index(self) -> None:
        series = Series.from_y([5, 6, 7])
        self.assertEqual(series.x.tolist(), [0.0, 1.0, 2.0])
        self.assertEqual(len(series), 3)
        self.assertEqual(series.data(), [(0.0, 5.0), (1.0, 6.0), (2.0, 7.0)])

    def test_positional_arguments_are_x_then_y(self) -> None:
        self.assertEqual(Series([1, 2], [3, 4]), Series.new([1, 2], [3, 4]))

    def test_style_string_is_parsed(self) -> None:
        series = Series.new([1, 2], [3, 4]).with_style("r~~4")
        self.assertEqual(series.style, parse_style("r~~4"))
        self.assertEqual(Series(y=[1], style="g").style, Style(color="green"))

    def test_invalid_style_type_is_rejected(self) -> None:
        with self.assertRaises(TypeError):
            Series(y=[1, 2], style=42)  # type: ignore[arg-type]

    def test_equality_ignores_name_and_treats_missing_style_as_default(self) -> None:
        a = Series.new([1, 2], [3, 4]).with_name("a")
        b = Series.new([1.0, 2.0], [3.0, 4.0]).with_style(Style())
        self.assertEqual(a, b)
        self.assertNotEqual(a, Series.new([1, 2], [3, 5]))
        self.assertNotEqual(a, a.with_style("r"))

    def test_equality_treats_nan_as_equal(self) -> None:
        self.assertEqual(Series(y=[1.0, None]), Series(y=[1.0, float("nan")]))


class FigureBuilderTests(unittest.TestCase):
    def test_parsed_and_declarative_figures_are_equal(self) -> None:
        x = [0, 1, 2, 3]
        y = [3, 1, 4, 1]
        parsed = FigureBuilder().with_series(Series.new(x, y).with_style("r.10~4")).build()
        declared = (
            FigureBuilder()
            .with_series(
                Series.new(x, y).with_style(
                    Style()
                    .with_color("red")
                    .with_marker(Marker(MarkerShape.CIRCLE, 10, True))
                    .with_stroke(Stroke(Curve.SMOOTH, 4, False))
                )
            )
            .build()
        )
        self.assertEqual(parsed, declared)

    def test_series_order_matters(self) -> None:
        a = Series(y=[1, 2], style="r")
        b = Series(y=[1, 2], style="b")
        self.assertNotEqual(
            FigureBuilder().with_series(a).with_series(b).build(),
            FigureBuilder().with_series(b).with_series(a).build(),
        )

    def test_empty_build_is_a_valid_figure(self) -> None:
        figure = FigureBuilder().build()
        self.assertEqual(len(figure), 0)
        self.assertEqual(figure, Figure())
        self.assertIs(figure.kind, FigureKind.NORMAL)
        self.assertEqual(figure.name, "figure")

    def test_built_figure_is_detached_from_builder(self) -> None:
        builder = FigureBuilder().with_series(Series(y=[1]))
        figure = builder.build()
        builder.with_series(Series(y=[2]))
        self.assertEqual(len(figure), 1)

    def test_figure_kind_first_styled_series_wins_and_conflicts_are_logged(self) -> None:
        builder = FigureBuilder().with_series(Series(y=[1, 2])).with_series(Series(y=[1, 2], style="@r"))
        with self.assertLogs("quickplot.figure", level="WARNING") as logs:
            builder.with_series(Series(y=[1, 2], style="%b"))
        self.assertIn("column", logs.output[0])
        figure = builder.build()
        self.assertIs(figure.kind, FigureKind.AREA)
        self.assertIs(figure.series[2].style.kind, FigureKind.COLUMN)

    def test_series_colors_fill_from_palette(self) -> None:
        figure = (
            FigureBuilder()
            .with_palette(1)
            .with_series(Series(y=[1]))
            .with_series(Series(y=[1], style="#123456"))
            .with_series(Series(y=[1]))
            .build()
        )
        palette = COLOR_PALETTES[1]
        self.assertEqual(figure.series_colors(), [palette[0], "#123456", palette[1]])

    def test_palette_index_wraps_and_size_is_validated(self) -> None:
        builder = FigureBuilder().with_palette(12)
        self.assertEqual(builder.palette(), COLOR_PALETTES[2])
        self.assertEqual(builder.build().palette, 2)
        with self.assertRaises(ValueError):
            builder.with_size(0, 100)
        with self.assertRaises(ValueError):
            FigureBuilder(width=-1)

    def test_figure_palette_index_wraps(self) -> None:
        figure = Figure(series=(Series(y=[1]),), palette=12)
        self.assertEqual(figure.palette, 2)
        self.assertEqual(figure.series_colors(), [COLOR_PALETTES[2][0]])

    def test_builder_series_list_is_private(self) -> None:
        with self.assertRaises(TypeError):
            FigureBuilder(_series=[Series(y=[1])])  # type: ignore[call-arg]
        self.assertNotIn("_series", repr(FigureBuilder()))

    def test_title_and_size_are_carried_but_not_compared(self) -> None:
        figure = FigureBuilder().with_title("demo").with_size(640, 480).build()
        self.assertEqual((figure.name, figure.width, figure.height), ("demo", 640, 480))
        self.assertEqual(figure, FigureBuilder().build())

    def test_with_series_rejects_non_series(self) -> None:
        with self.assertRaises(TypeError):
            FigureBuilder().with_series([1, 2, 3])  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main()

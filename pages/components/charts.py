"""Chart components using Plotly for data visualization."""

import plotly.express as px
import pandas as pd


def create_conversion_table(results: list) -> pd.DataFrame:
    """Build a table of converted values, one row per unit.

    Args:
        results: List of ConversionResult objects

    Returns:
        DataFrame with Unit and Value columns
    """
    return pd.DataFrame(
        [(r.unit, r.value) for r in results],
        columns=['Unit', 'Value'],
    )


def create_conversion_curve(inputs: list, outputs: list, from_unit: str, to_unit: str):
    """Create line chart of converted values over a range of inputs.

    Args:
        inputs: Values in the source unit
        outputs: Converted values, same length as inputs
        from_unit: Source unit name (x axis)
        to_unit: Target unit name (y axis)

    Returns:
        Plotly figure
    """
    df = pd.DataFrame({'Input': inputs, 'Output': outputs})

    fig = px.line(
        df,
        x='Input',
        y='Output',
        title=f"{from_unit} → {to_unit}",
        markers=True,
    )

    fig.update_layout(
        xaxis_title=from_unit,
        yaxis_title=to_unit,
        hovermode='x unified'
    )

    return fig

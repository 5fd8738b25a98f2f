import pandas as pd

from trip_aggregates import DOW_ORDER


def pivot_heatmap(by_dow_hour):
    """Dense weekday x hour matrix of trip counts.

    Rows are always Monday..Sunday; columns are the sorted hours present in
    ``by_dow_hour``. Combinations that were never observed are 0.
    """
    hours = sorted(by_dow_hour["hour"].unique())
    if not hours:
        return pd.DataFrame(index=pd.Index(DOW_ORDER, name="dow"),
                            columns=pd.Index([], name="hour"), dtype="int64")

    heat = by_dow_hour.pivot_table(
        values="trips",
        index="dow",
        columns="hour",
        aggfunc="sum",
        fill_value=0
    )
    heat = heat.reindex(index=DOW_ORDER, columns=hours, fill_value=0)
    heat.index.name = "dow"
    heat.columns.name = "hour"
    return heat.astype("int64")

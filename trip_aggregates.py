from typing import NamedTuple

import pandas as pd

DOW_ORDER = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
DOW_ORDINAL = {name: i for i, name in enumerate(DOW_ORDER, start=1)}


class TripAggregates(NamedTuple):
    by_station: pd.DataFrame
    by_hour: pd.DataFrame
    by_dow_hour: pd.DataFrame


def station_summary(trips):
    """Trips, mean duration and rush share per start station, busiest first.

    Stations with equal counts keep the order in which they first appear in
    ``trips``.
    """
    by_station = (
        trips.groupby("start_station", sort=False)
             .agg(trips=("trip_id", "count"),
                  avg_duration=("duration_min", "mean"),
                  rush_share=("is_rush", "mean"))
             .reset_index()
             .rename(columns={"start_station": "station"})
    )
    by_station["rush_share"] = by_station["rush_share"].astype(float)
    return by_station.sort_values("trips", ascending=False, kind="stable").reset_index(drop=True)


def hourly_counts(trips):
    return (
        trips.groupby("hour")
             .size()
             .rename("trips")
             .reset_index()
             .sort_values("hour")
             .reset_index(drop=True)
    )


def dow_hour_counts(trips):
    """Trip counts per (weekday, hour), Monday first."""
    counts = trips.groupby(["dow", "hour"]).size().rename("trips").reset_index()
    counts["_ordinal"] = counts["dow"].map(DOW_ORDINAL)
    return (
        counts.sort_values(["_ordinal", "hour"], kind="stable")
              .drop(columns="_ordinal")
              .reset_index(drop=True)
    )


def aggregate_trips(trips):
    return TripAggregates(
        by_station=station_summary(trips),
        by_hour=hourly_counts(trips),
        by_dow_hour=dow_hour_counts(trips),
    )

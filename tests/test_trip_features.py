import pandas as pd

from trip_features import add_features


def test_appends_derived_columns_without_touching_originals(trips):
    before = trips.copy()
    df = add_features(trips)

    pd.testing.assert_frame_equal(trips, before)
    assert list(df.columns[:5]) == list(trips.columns)
    assert {"day", "hour", "dow", "is_rush"} <= set(df.columns)


def test_derived_values(featured):
    assert featured["hour"].between(0, 23).all()
    assert (featured["day"] == featured["started_at"].dt.normalize()).all()
    assert (featured["dow"] == featured["day"].dt.day_name()).all()
    assert (featured["is_rush"] == featured["hour"].isin([8, 9, 17, 18])).all()


def test_known_timestamp():
    trips = pd.DataFrame({
        "trip_id": [1, 2],
        "start_station": ["A", "B"],
        "end_station": ["B", "A"],
        "started_at": pd.to_datetime(["2026-01-12 08:15:00", "2026-01-18 13:00:59"]),
        "duration_min": [10.0, 20.0],
    })
    df = add_features(trips)

    assert df["hour"].tolist() == [8, 13]
    assert df["dow"].tolist() == ["Monday", "Sunday"]
    assert df["is_rush"].tolist() == [True, False]
    assert df["day"].tolist() == [pd.Timestamp("2026-01-12"), pd.Timestamp("2026-01-18")]


def test_rush_hours_dominate(large_featured):
    assert large_featured["is_rush"].mean() > 0.40

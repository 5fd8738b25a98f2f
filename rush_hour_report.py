import os
import sys
import matplotlib.pyplot as plt
import seaborn as sns

import rush_config
from trip_generator import InvalidTripCount, make_trips
from trip_features import add_features
from trip_aggregates import aggregate_trips
from heatmap_pivot import pivot_heatmap
from station_score import ZeroDurationError, score_stations

VOLUME_COLUMNS = ["station", "trips", "avg_duration", "rush_share"]
SCORE_COLUMNS  = VOLUME_COLUMNS + ["rush_score"]

sns.set(style="whitegrid")
plt.rcParams.update({"figure.dpi": 120})


def save_fig(fig, output_path):
    try:
        os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)
        fig.tight_layout()
        fig.savefig(output_path)
    finally:
        plt.close(fig)


def render_charts(by_hour, heat, output_path):
    """Hourly line plot above a weekday x hour heatmap, saved as one image."""
    fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(11, 6.5))

    ax1.plot(by_hour["hour"], by_hour["trips"], marker="o")
    ax1.set_title("Trips by Hour (Synthetic Citi Bike)")
    ax1.set_xlabel("Hour")
    ax1.set_ylabel("Trips")

    sns.heatmap(heat, ax=ax2, cmap="viridis", cbar_kws={"label": "Trips"})
    ax2.set_title("Trips Heatmap (Day of Week x Hour)")
    ax2.set_xlabel("Hour")
    ax2.set_ylabel("Day")

    save_fig(fig, output_path)
    return output_path


def format_station_table(by_station, k=rush_config.TOP_K, columns=VOLUME_COLUMNS):
    return by_station.head(k)[columns].to_string(index=False, float_format=lambda v: f"{v:.3f}")


def run(count=rush_config.DEFAULT_COUNT, seed=rush_config.DEFAULT_SEED,
        output_path=os.path.join(rush_config.OUTPUT_DIR, rush_config.OUTPUT_FILE),
        top_k=rush_config.TOP_K):
    print(f"🚲 Generating {count:,} synthetic trips (seed={seed})…")
    trips = make_trips(count, seed=seed)

    print("⚙️ Deriving hour / weekday features…")
    trips = add_features(trips)

    print("📊 Aggregating by station, hour and weekday…")
    aggs = aggregate_trips(trips)

    print("\nTop stations by trip volume:")
    print(format_station_table(aggs.by_station, top_k, VOLUME_COLUMNS))

    heat = pivot_heatmap(aggs.by_dow_hour)
    render_charts(aggs.by_hour, heat, output_path)
    print(f"\n✅ Saved plot -> {output_path}")

    scored = score_stations(aggs.by_station)
    print("\nStations ranked by Rush Hour Score:")
    print(format_station_table(scored, top_k, SCORE_COLUMNS))

    return aggs._replace(by_station=scored), heat


def main(argv=None):
    args = rush_config.parse_args(argv)
    try:
        run(count=args.count, seed=args.seed, output_path=args.output, top_k=args.top)
    except (InvalidTripCount, ZeroDurationError, OSError) as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

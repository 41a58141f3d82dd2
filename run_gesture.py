"""
Replay a recorded session through the lateral-raise counter.

Usage:
    python run_gesture.py sessions/session_2026-10-17T09-00-00Z/raw.jsonl
    python run_gesture.py set1.csv --mode raw --policy immediate
"""

import argparse
import json
import logging
import sys

from gitness import (
    DetectionMode,
    GestureConfig,
    GestureCounter,
    GestureError,
    LatchPolicy,
    estimate_sample_rate,
    load_recording,
    resample,
)


def build_config(args) -> GestureConfig:
    data = {}
    if args.config:
        with open(args.config, "r", encoding="utf-8") as f:
            data = json.load(f)
    config = GestureConfig.from_dict(data)

    if args.mode:
        config.mode = DetectionMode(args.mode)
    if args.policy:
        config.latch_policy = LatchPolicy(args.policy)
    if args.window:
        config.window_size = args.window
    return config.validate()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Count lateral raises in a recorded session")
    parser.add_argument("recording", help="Session file (.jsonl or .csv)")
    parser.add_argument("--mode", choices=[m.value for m in DetectionMode])
    parser.add_argument("--policy", choices=[p.value for p in LatchPolicy])
    parser.add_argument("--window", type=int, help="Buffer window size (samples)")
    parser.add_argument("--resample-hz", type=float, help="Resample to this rate before replay")
    parser.add_argument("--config", help="JSON file with GestureConfig fields")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper())

    try:
        config = build_config(args)
        samples = load_recording(args.recording)
    except (GestureError, OSError, json.JSONDecodeError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    rate = estimate_sample_rate(samples)
    if args.resample_hz:
        samples = resample(samples, args.resample_hz)

    print(f"\n--- LATERAL RAISE REPLAY ({config.mode.value}) ---")
    print(f"Samples: {len(samples)}  "
          f"rate: {'n/a' if rate is None else f'{rate:.1f} Hz'}  "
          f"window: {config.window_size}\n")

    counter = GestureCounter(config)
    counter.on_gesture_detected(lambda ev: print(f"rep={ev.count:3d}  t={ev.timestamp:8.3f}s"))

    for sample in samples:
        counter.ingest(sample)

    print("\n--- DONE ---")
    print("Total reps:", counter.count)
    return 0


if __name__ == "__main__":
    sys.exit(main())

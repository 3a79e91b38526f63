"""
Headless "observer" runner for the asteroid field.

Runs the simulation loop (no rendering) from a seed, splitting a seeded choice of
rock every few ticks, and prints:
- rock count / tier histogram at the log cadence
- a digest of the final field (same seed + same args => same digest)

Usage:
  python tools/observe_field.py --seconds 20 --seed 3
  python tools/observe_field.py --seconds 10 --seed 3 --qa --repeat
"""

from __future__ import annotations

import argparse
import sys
import zlib
from collections import Counter
from pathlib import Path

# Ensure imports work when running as `python tools/observe_field.py`
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from config import FPS, ASTEROID_MIN_VERTICES, ASTEROID_MAX_VERTICES  # noqa: E402
from game.geometry.vector import FIELD  # noqa: E402
from game.sim.determinism import derive_seed, rand_int  # noqa: E402
from game.systems import init, split, tick  # noqa: E402


def field_digest(asteroids) -> str:
    """Stable fingerprint of a field (float reprs are exact, so this is bit-level)."""
    crc = 0
    for rock in asteroids:
        crc = zlib.crc32(repr(rock).encode("utf-8"), crc)
    return f"{crc & 0xFFFFFFFF:08x}"


def tier_summary(asteroids) -> str:
    counts = Counter(rock.size for rock in asteroids)
    if not counts:
        return "tiers=none"
    return "tiers=" + ",".join(f"{size}:{counts[size]}" for size in sorted(counts, reverse=True))


def qa_violations(asteroids, bounds=FIELD) -> list[str]:
    problems: list[str] = []
    for i, rock in enumerate(asteroids):
        if rock.size < 1:
            problems.append(f"rock {i}: size {rock.size} < 1")
        if not (bounds.left <= rock.position.x <= bounds.right and bounds.bottom <= rock.position.y <= bounds.top):
            problems.append(f"rock {i}: position {rock.position} outside field")
        if not (ASTEROID_MIN_VERTICES <= len(rock.points) <= ASTEROID_MAX_VERTICES):
            problems.append(f"rock {i}: {len(rock.points)} outline points")
    return problems


def run_observation(*, seed: int, seconds: float, split_every: int, log_every: int = 0, qa: bool = False) -> dict:
    """
    Simulate `seconds` of play at the configured FPS.

    The population and the split choices draw from separate derived seeds so that
    changing the split cadence does not change the starting field.
    """
    dt = 1.0 / FPS
    ticks = int(round(float(seconds) * FPS))
    asteroids, _ = init().run(derive_seed(seed, "population"))
    split_seed = derive_seed(seed, "splits")

    splits = 0
    debris = 0
    problems: list[str] = []
    for t in range(1, ticks + 1):
        asteroids = tick(dt, asteroids)
        if split_every > 0 and t % split_every == 0 and asteroids:
            index, split_seed = rand_int(0, len(asteroids) - 1).run(split_seed)
            (children, particles), split_seed = split(asteroids[index]).run(split_seed)
            asteroids = asteroids[:index] + asteroids[index + 1:] + children
            splits += 1
            debris += len(particles)
        if qa:
            problems.extend(f"tick {t}: {p}" for p in qa_violations(asteroids))
        if log_every > 0 and t % log_every == 0:
            print(f"[observe_field] t={t / FPS:6.2f}s rocks={len(asteroids)} {tier_summary(asteroids)} splits={splits}")

    return {
        "ticks": ticks,
        "rocks": len(asteroids),
        "splits": splits,
        "debris": debris,
        "digest": field_digest(asteroids),
        "problems": problems,
        "asteroids": asteroids,
    }


def main() -> int:
    ap = argparse.ArgumentParser(description="Headless asteroid field observer")
    ap.add_argument("--seconds", type=float, default=10.0, help="simulation duration")
    ap.add_argument("--seed", type=int, default=3, help="rng seed")
    ap.add_argument("--split-every", type=int, default=45, help="split cadence in ticks (0 = never)")
    ap.add_argument("--log-every", type=int, default=120, help="log cadence in ticks")
    ap.add_argument("--qa", action="store_true", help="check field invariants every tick; non-zero exit on violation")
    ap.add_argument("--repeat", action="store_true", help="run twice and fail if the digests differ")
    ns = ap.parse_args()

    result = run_observation(
        seed=ns.seed, seconds=ns.seconds, split_every=ns.split_every, log_every=ns.log_every, qa=ns.qa
    )
    print(
        f"[observe_field] done: ticks={result['ticks']} rocks={result['rocks']} "
        f"splits={result['splits']} debris={result['debris']} digest={result['digest']}"
    )

    rc = 0
    if result["problems"]:
        print(f"[observe_field] FAIL: {len(result['problems'])} invariant violation(s)")
        for p in result["problems"][:20]:
            print(f"- {p}")
        rc = 1

    if ns.repeat:
        again = run_observation(seed=ns.seed, seconds=ns.seconds, split_every=ns.split_every)
        if again["digest"] != result["digest"]:
            print(f"[observe_field] FAIL: replay digest {again['digest']} != {result['digest']}")
            rc = 1
        else:
            print("[observe_field] replay digest matches")

    return rc


if __name__ == "__main__":
    raise SystemExit(main())

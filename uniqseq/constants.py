# Field limits
MAX_PRIME_32 = 4294967291  # largest prime below 2**32, ≡ 3 (mod 4)
UINT32_MASK = 0xFFFFFFFF

DEFAULT_SEED = 1


# Baseline PRNG seeding
BASELINE_SEED_BASE = b"UNIQSEQ-BASELINE\x00"
DEFAULT_BASELINE_SEED = 0


# Benchmark configuration
BENCH_UNIVERSES = (1000, 10000, 100000)
HUGE_UNIVERSE = 1_000_000_000  # naive chooser is impractical here

# (name, start, end, inc) as fractions of the universe size
SCENARIO_SMALL = ("a relatively small count", 0.01, 0.1, 0.001)
SCENARIO_MEDIUM = ("a relatively medium count", 0.4, 0.6, 0.1)
SCENARIO_HIGH = ("a relatively high count", 0.8, 1.0, 0.1)
SCENARIO_FULL = ("a full range count", 0.05, 1.0, 0.5)

BENCH_SCENARIOS = (SCENARIO_SMALL, SCENARIO_MEDIUM, SCENARIO_HIGH, SCENARIO_FULL)

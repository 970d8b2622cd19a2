"""Big integers and prime fields for ECC: demo entry point.

Runs a few scenarios against the integer engine and the field layer and
prints the results: GF(13) arithmetic, Fermat checks in GF(2^127 - 1),
schoolbook vs FFT multiplication, and the division sign convention.
"""

import sys

from core import rng
from core.field import FieldElement
from core.integer import Integer, ipow
from core.multiply import fft_mult, long_mult
from metrics import Metrics

P127 = (1 << 127) - 1
OPERAND_SIZES = [8, 50, 64, 257, 1024]  # digits per operand


def run_small_field():
    p = 13
    a, b = FieldElement(7, p), FieldElement(12, p)
    print(f"a = {a}, b = {b}")
    print(f"  a + b   = {a + b}")
    print(f"  a - b   = {a - b}")
    print(f"  a * b   = {a * b}")
    print(f"  a / b   = {a / b}")
    print(f"  a ** 5  = {a ** 5}")
    print(f"  b^-1    = {b.inverse()}")
    print()


def run_fermat(trials: int):
    one = FieldElement.one(P127)
    ok = 0
    for _ in range(trials):
        a = FieldElement.random(P127)
        if a.power(P127 - 1) == one and a * a.inverse() == one:
            ok += 1
    print(f"Fermat checks in GF(2^127 - 1): {ok}/{trials} passed")
    print()


def run_multiplication(metrics: Metrics):
    for n in OPERAND_SIZES:
        a = Integer(rng.randbits(8 * n) | (1 << (8 * n - 1)))
        b = Integer(rng.randbits(8 * n) | (1 << (8 * n - 1)))
        slow = metrics.timed("long_mult", long_mult, a.data(), b.data())
        fast = metrics.timed("fft_mult", fft_mult, a.data(), b.data())
        status = "agree" if slow == fast else "MISMATCH"
        print(f"  {n:5d} x {n:<5d} digits: {status}")
    print()


def run_division_convention():
    for x, y in [(7, 2), (-7, 2), (7, -2), (-7, -2)]:
        q, r = divmod(Integer(x), Integer(y))
        print(f"  divmod({x}, {y}) = ({q}, {r})")
    print(f"  3 ** 100 mod 2^127 - 1 = {ipow(3, 100, P127)}")
    print()


def main():
    seed = int(sys.argv[1]) if len(sys.argv) > 1 else 42
    rng.set_seed(seed)
    metrics = Metrics()
    metrics.start()

    print("=" * 50)
    print("SCENARIO 1: Field arithmetic in GF(13)")
    print("=" * 50)
    run_small_field()

    print("=" * 50)
    print("SCENARIO 2: Fermat round trip")
    print("=" * 50)
    run_fermat(trials=5)

    print("=" * 50)
    print("SCENARIO 3: Schoolbook vs FFT multiplication")
    print("=" * 50)
    run_multiplication(metrics)

    print("=" * 50)
    print("SCENARIO 4: Floor division convention")
    print("=" * 50)
    run_division_convention()

    metrics.stop()
    print("--- Metrics ---")
    print(f"  Seed: {seed}")
    print(f"  Time: {metrics.elapsed:.3f}s")
    for path in sorted(metrics.calls):
        print(f"  {path}: {metrics.calls[path]} calls, {metrics.seconds[path]:.3f}s")
    print()


if __name__ == "__main__":
    main()

import random
import threading

from sharesplit.field import PRIME
from sharesplit.random_source import CoefficientSource, default_source


def test_default_source_is_cryptographic():
    assert CoefficientSource().is_cryptographic
    assert default_source().is_cryptographic


def test_seeded_source_is_reproducible():
    a = CoefficientSource(random.Random(7))
    b = CoefficientSource(random.Random(7))
    assert not a.is_cryptographic
    assert a.coefficients(20) == b.coefficients(20)
    assert a.coefficients(1) == b.coefficients(1)


def test_draws_stay_inside_the_field():
    source = CoefficientSource(random.Random(3))
    values = source.coefficients(5000)
    assert all(0 <= v < PRIME for v in values)
    # every element, including 256, should show up eventually
    assert len(set(values)) == PRIME


def test_default_source_is_per_thread():
    main_source = default_source()
    assert default_source() is main_source

    seen = []
    worker = threading.Thread(target=lambda: seen.append(default_source()))
    worker.start()
    worker.join()
    assert seen and seen[0] is not main_source

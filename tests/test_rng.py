from blockfall.game.rng import LCG_MODULUS, PseudoRandomStream, lcg_hash


def test_advance_applies_lcg_recurrence():
    assert PseudoRandomStream(0).advance().seed == 12345
    assert PseudoRandomStream(1).advance().seed == (1103515245 + 12345) % 2**31


def test_advance_does_not_mutate():
    stream = PseudoRandomStream(99)
    stream.advance()
    assert stream.seed == 99


def test_value_does_not_advance():
    stream = PseudoRandomStream(123456789)
    assert stream.value() == stream.value()
    assert stream.seed == 123456789


def test_value_scales_into_selector_range():
    assert PseudoRandomStream(0).value() == 0
    assert PseudoRandomStream(LCG_MODULUS // 2).value() == 3
    assert PseudoRandomStream(LCG_MODULUS - 2).value() == 6
    # top seed would scale to 7 without clamping
    assert PseudoRandomStream(LCG_MODULUS - 1).value() == 6


def test_values_stay_in_range_over_many_steps():
    stream = PseudoRandomStream(2024)
    seen = set()
    for _ in range(2000):
        value = stream.value()
        assert 0 <= value <= 6
        seen.add(value)
        stream = stream.advance()
    assert seen == set(range(7))


def test_same_seed_gives_identical_sequences():
    a = PseudoRandomStream(31337)
    b = PseudoRandomStream(31337)
    for _ in range(100):
        assert a.value() == b.value()
        assert a == b
        a, b = a.advance(), b.advance()


def test_seed_wraps_modulo():
    assert PseudoRandomStream(-1).seed == LCG_MODULUS - 1
    assert PseudoRandomStream(LCG_MODULUS + 5).seed == 5


def test_from_clock_hashes_millisecond_component():
    stream = PseudoRandomStream.from_clock(lambda: 5.5)
    assert stream.seed == lcg_hash(500)


def test_fork_is_off_the_advance_chain():
    stream = PseudoRandomStream(7)
    fork = stream.fork()
    assert fork == stream.fork()
    assert stream.seed == 7
    chain = {stream.seed}
    step = stream
    for _ in range(5):
        step = step.advance()
        chain.add(step.seed)
    assert fork.seed not in chain

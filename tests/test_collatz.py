from collatz import collatz_steps


def test_one_takes_no_steps():
    assert collatz_steps(1) == 0


def test_six():
    # 6 -> 3 -> 10 -> 5 -> 16 -> 8 -> 4 -> 2 -> 1
    assert collatz_steps(6) == 8


def test_known_values():
    assert collatz_steps(2) == 1
    assert collatz_steps(7) == 16
    assert collatz_steps(27) == 111
    assert collatz_steps(97) == 118


def test_powers_of_two():
    for k in range(20):
        assert collatz_steps(2 ** k) == k

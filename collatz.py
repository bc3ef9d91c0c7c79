# collatz.py


def collatz_steps(n):
    """
    Number of n -> n/2 (even) / n -> 3n+1 (odd) transformations needed to reach 1.
    Expects n >= 1; callers validate their inputs.
    """
    steps = 0
    while n != 1:
        if n % 2 == 0:
            n = n // 2
        else:
            n = 3 * n + 1
        steps += 1
    return steps

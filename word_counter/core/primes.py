# primes.py
# Table sizing helpers. Trial division is plenty for the table sizes we use.


def is_prime(n: int) -> bool:
    """True if n is prime (n < 2 is never prime)."""
    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0:
        return False
    d = 3
    while d * d <= n:
        if n % d == 0:
            return False
        d += 2
    return True


def next_prime(n: int) -> int:
    """
    Return the smallest prime >= n.
    Anything at or below 2 gives 2, so next_prime(0) == next_prime(1) == 2.
    """
    if n <= 2:
        return 2
    while not is_prime(n):
        n += 1
    return n

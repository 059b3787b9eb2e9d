"""Prime factorisation by trial division."""


def factors(n: int) -> list[int]:
    """Prime factors of ``n`` in ascending order, with repetition."""
    result: list[int] = []
    divisor = 2
    while divisor * divisor <= n:
        while n % divisor == 0:
            result.append(divisor)
            n //= divisor
        divisor += 1
    if n > 1:
        result.append(n)
    return result
def greatest_common_divisor(a: int, b: int) -> int:
    """
    Máximo común divisor por el algoritmo de Euclides (versión iterativa).

    Trabaja sobre valores absolutos, así que el resultado nunca es negativo.
    gcd(a, 0) = |a|; gcd(0, 0) = 0.
    """
    a, b = abs(a), abs(b)
    while b != 0:
        a, b = b, a % b
    return a

import math

def char_in_range(char, min, max):
    val = ord(char)
    return val >= ord(min) and val <= ord(max)

def is_digits(string):
    # Somente 0-9 em ASCII, str.isdigit() aceitaria outros dígitos unicode
    return len(string) > 0 and all(char_in_range(c, '0', '9') for c in string)

def ieee_div(left, right):
    left, right = float(left), float(right)

    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan

        return math.copysign(math.inf, left) * math.copysign(1.0, right)

    return left / right

def ieee_pow(left, right):
    left, right = float(left), float(right)

    try:
        return math.pow(left, right)
    except OverflowError:
        # Base negativa com expoente inteiro ímpar mantém o sinal
        if left < 0 and right.is_integer() and right % 2 == 1:
            return -math.inf
        return math.inf
    except ValueError:
        if left == 0:
            # pow(-0.0, -3) = -inf
            if math.copysign(1.0, left) < 0 and right.is_integer() and right % 2 == 1:
                return -math.inf
            return math.inf

        # Base negativa com expoente fracionário
        return math.nan

def number_string(value):
    return repr(float(value))

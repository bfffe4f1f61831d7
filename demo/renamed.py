def add(x, y):
    return x + y


def average(items):
    if not items:
        return 0
    return sum(items) / len(items)

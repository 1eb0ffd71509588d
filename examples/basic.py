from functools import reduce

from floatdur import Instant, TimeFormat, as_fractional_secs


def main() -> None:
    start = Instant.now()

    result = reduce(lambda acc, x: acc * x, range(1, 12), 1)

    elapsed = start.elapsed()
    print(f"Needed {TimeFormat(elapsed)}")
    print(f"In seconds: {as_fractional_secs(elapsed)}")

    print(f"Result: {result}")


if __name__ == "__main__":
    main()

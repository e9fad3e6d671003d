from __future__ import annotations

from _infra import banner, run

from kungfu import Error, Ok

from skink import collect_writer, cycle, flow, product, range, take, to_result, zip, zip_strict


def main() -> None:
    banner("01_quickstart: range + zip + product + cycle")

    # Count down from the far corner toward 0.
    print(list(range(3, -1, -1)))

    names = ["ada", "grace", "linus"]
    scores = [91, 88]
    print(list(zip(names, scores)))

    match to_result(zip_strict(names, scores)):
        case Ok(rows):
            print(f"rows: {rows}")
        case Error(err):
            print(f"mismatch at round {err.round}, exhausted inputs {list(err.exhausted)}")

    for x, y in product(range(2), "ab"):
        print(f"cell {x}{y}")

    seasons = cycle(["Winter", "Spring", "Summer", "Autumn"])
    print(list(take(seasons, n=6)))

    banner("flow + writer")
    labels = flow(range(10)).filter(lambda n: n % 3 == 0).map(lambda n: f"#{n}")
    print(labels.collect())

    wr = collect_writer(labels.compile())
    for event in wr.log:
        print(event)


if __name__ == "__main__":
    run(main)

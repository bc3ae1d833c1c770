"""Example suite: nested tests, async bodies and every comparison kind.

Run directly (``python examples/calculator_suite.py``) or through the CLI
(``treetest run examples/calculator_suite.py``).
"""

import asyncio

from treetest import RuntimeTester, Tester


def add(a, b):
    return a + b


def divide(a, b):
    return a / b


async def slow_square(x):
    await asyncio.sleep(0.01)
    return x * x


def arithmetic(T: RuntimeTester) -> None:
    def addition(T: RuntimeTester) -> None:
        T.assert_("small numbers").actual(add(2, 3)).eq(5)
        T.assert_("negatives").actual(add(-2, -3)).lt(0)
        T.assert_("strings concatenate").actual(add("tree", "test")).eq("treetest")

    def division(T: RuntimeTester) -> None:
        T.assert_("exact").actual(divide(9, 3)).eq(3.0)
        T.assert_("fraction").actual(divide(1, 4)).lte(0.25)
        T.test(
            "float result",
            lambda T: T.assert_("int / int is float").actual(type(divide(4, 2))).eq(float),
        )

    T.test("add()", addition).test("divide()", division)


async def squares(T: RuntimeTester) -> None:
    results = await asyncio.gather(*(slow_square(x) for x in range(5)))
    T.assert_("count").actual(len(results)).eq(5)
    T.assert_("largest").actual(max(results)).gte(16)
    T.assert_("no negatives").actual(min(results)).ne(-1)


def root(T: RuntimeTester) -> None:
    T.test("arithmetic", arithmetic)
    T.test("async squares", squares)


suite = Tester("Calculator", root)

if __name__ == "__main__":
    suite.execute()

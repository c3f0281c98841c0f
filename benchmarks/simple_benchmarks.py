from timeit import timeit

from tinylisp.interpreter import Interpreter
from tinylisp.types.symbol import Symbol
from tinylisp.types.environment import Environment
from tinylisp.reader.cache import ParseCache
from tinylisp.reader.parser import read_program
from tinylisp.evaluation.evaluator import evaluate


def time_evaluation(code: str, rounds: int) -> float:
    """Time evaluation alone: parses once and repeatedly evaluates the same tree."""
    itp = Interpreter(cache=ParseCache(0))
    program = read_program(code)
    # Warmup
    for expr in program:
        evaluate(expr, itp.env)

    def run():
        for expr in program:
            evaluate(expr, itp.env)

    return timeit(run, number=rounds)


def time_parse(code: str, rounds: int, cache_size: int) -> float:
    """Time parsing through a ParseCache of the given size (0 = no caching)."""
    cache = ParseCache(cache_size)
    cache.read(code)
    return timeit(lambda: cache.read(code), number=rounds)


# Environment lookup through a deep parent chain

def bench_lookup_chain(n_envs: int = 1000, n_lookups: int = 10000) -> float:
    # Build an environment chain with a binding at the root
    root = Environment()
    key = Symbol("answer")
    root.define(key, 42)
    env = root
    for _ in range(n_envs):
        env = env.child_with()
    # Warmup
    for _ in range(1000):
        env.lookup(key)
    # Timed
    return timeit(lambda: env.lookup(key), number=n_lookups)


LAMBDA_APPLY_CODE = "(let ((add (lambda (x y) (+ x y)))) (add 1 2))"

FACTORIAL_CODE = r"""
(defun fact (n)
  (if (<= n 1)
      1
      (* n (fact (- n 1)))))
(fact 20)
"""

FIB_CODE = r"""
(defun fib (n)
  (if (< n 2)
      n
      (+ (fib (- n 1)) (fib (- n 2)))))
(fib 15)
"""


if __name__ == "__main__":
    print("Benchmark: environment lookup chain (pure Python env lookup)")
    print(f"  time: {bench_lookup_chain():.6f}s")

    for name, code, rounds in [
        ("lambda application", LAMBDA_APPLY_CODE, 20000),
        ("recursive factorial", FACTORIAL_CODE, 500),
        ("recursive fib 15", FIB_CODE, 20),
    ]:
        print(f"Benchmark: {name}")
        print(f"  evaluation: {time_evaluation(code, rounds):.6f}s  [rounds={rounds}]")

    print("Benchmark: parsing the factorial program")
    print(f"  uncached: {time_parse(FACTORIAL_CODE, 5000, 0):.6f}s  |  cached: {time_parse(FACTORIAL_CODE, 5000, 16):.6f}s")

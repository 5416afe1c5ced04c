from io import StringIO

from letlang.demo import run_demo
from letlang.writer import IndentingWriter


def test_demo_renders_and_dumps_every_sample() -> None:
    stream = StringIO()
    run_demo(IndentingWriter(stream=stream))
    output = stream.getvalue()

    assert " -> let myVar = anotherVar;return 10;\n" in output
    assert " -> let total = (((-price) * 2) + tax);(!(total < limit))\n" in output
    assert " -> let myVar = anotherVar;return 10;(myVar == 10)\n" in output
    assert output.count("Program\n") == 3

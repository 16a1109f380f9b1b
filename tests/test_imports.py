import logging

import calc
from calc.dsl import lexer, parser
from calc.interp import core
from calc.util.logging import configure_logging, get_logger


def test_imports_and_public_api() -> None:
    assert calc.__version__
    assert lexer is not None
    assert parser is not None
    assert core is not None
    assert calc.evaluate(calc.parse(calc.tokenize("2pi"))) == calc.calculate("2*pi")


def test_configure_logging_installs_rich_handler() -> None:
    from rich.logging import RichHandler

    configure_logging(logging.DEBUG)
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(h, RichHandler) for h in root.handlers)
    assert get_logger("calc").name == "calc"
    configure_logging()

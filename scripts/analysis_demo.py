import os
import sys
import traceback

THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT = os.path.abspath(os.path.join(THIS_DIR, ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from simple_beam.services.logging_setup import setup_logging
logger = setup_logging()

def _excepthook(exctype, value, tb):
    msg = "".join(traceback.format_exception(exctype, value, tb))
    logger.error("Excepción no capturada:\n%s", msg)
    sys.__excepthook__(exctype, value, tb)

sys.excepthook = _excepthook

from simple_beam.domain.cases import default_case
from simple_beam.engine.analysis import run_analysis
from simple_beam.services.summary import summary_lines


def main():
    report = run_analysis(default_case())
    if not report.ok:
        print(report.error)
        return 1
    print("\n".join(summary_lines(report.analysis)))
    return 0


if __name__ == "__main__":
    sys.exit(main())

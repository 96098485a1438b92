import subprocess
import sys
from pathlib import Path


def test_import_without_setup_logs_to_stderr():
    code = (
        "from merkle_fixtures.logging_config import get_logger\n"
        "log = get_logger('check')\n"
        "log.debug('hidden')\n"
        "log.warning('shown')\n"
    )
    proc = subprocess.run(
        [sys.executable, "-c", code],
        capture_output=True,
        text=True,
        cwd=Path(__file__).resolve().parent.parent,
    )

    assert proc.returncode == 0
    assert proc.stdout == ""
    assert "shown" in proc.stderr
    assert "hidden" not in proc.stderr

import shutil
from pathlib import Path
from typing import Optional

from ..domain.models import DiffJob
from ..session import Session

DIFF_COMMAND = ["diffoscope", "--new-file"]
STYLESHEET_NAME = "diffoscope.css"
BUNDLED_STYLESHEET = Path(__file__).resolve().parent.parent / "resources" / STYLESHEET_NAME


class DiffRunner:
    """produces an html report of two gem archives with diffoscope."""

    def __init__(self, session: Session, output_dir: Path = Path("out"), stylesheet: Optional[Path] = None):
        self.session = session
        self.output_dir = Path(output_dir)
        self.stylesheet = stylesheet or BUNDLED_STYLESHEET

    def output_path(self, job: DiffJob) -> Path:
        return self.output_dir / job.report_name

    def _install_stylesheet(self, output_dir: Path):
        # the report links the stylesheet relative to itself
        target = output_dir / STYLESHEET_NAME
        if not target.exists() and self.stylesheet.exists():
            shutil.copyfile(self.stylesheet, target)

    def diff(self, path_a: Path, path_b: Path, output_path: Path) -> Path:
        """
        run diffoscope on two archives.

        the exit status of diffoscope is not checked: it exits 1 whenever the
        inputs differ, and a failed run simply leaves no report behind.
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)
        self._install_stylesheet(output_path.parent)
        command = [
            *DIFF_COMMAND,
            f"--html={output_path}",
            f"--css={STYLESHEET_NAME}",
            str(path_a),
            str(path_b),
        ]
        self.session.runner.run(command, strict=False, quiet=True)
        return output_path

    def run(self, job: DiffJob) -> Path:
        return self.diff(job.path_a, job.path_b, self.output_path(job))

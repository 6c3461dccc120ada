# ===== Part 1: Imports & Logging ============================================
import argparse
import logging
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

from modules.dynamic_forms import ConfigProvider, LaunchParams, get_form_panel
from utils.app_settings import DEV_MODE
from utils.styles import apply_app_palette, set_theme

logger = logging.getLogger(__name__)
logging.basicConfig(
    level=logging.DEBUG if DEV_MODE else logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)


# ===== Part 2: Launch parameters ============================================
def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a dynamic incident form")
    parser.add_argument("--form", help="Form kind, e.g. incident or audit")
    parser.add_argument("--lang", help="Language code for the title, e.g. en")
    parser.add_argument("--role", help="Role used to filter fields, e.g. user or admin")
    parser.add_argument("--query", help='Query string, e.g. "?form=audit&role=admin"')
    parser.add_argument("--theme", choices=("light", "dark"), default="light")
    parser.add_argument("--forms-dir", dest="forms_dir", help="Directory holding form documents")
    return parser.parse_args(argv)


def launch_params(args: argparse.Namespace) -> LaunchParams:
    """Explicit flags override values taken from ``--query``."""
    base = LaunchParams.from_query(args.query) if args.query else LaunchParams()
    return LaunchParams.create(
        args.form or base.form_kind,
        args.lang or base.language,
        args.role or base.role,
    )


# ===== Part 3: Entry point ===================================================
def main(argv=None) -> int:
    args = parse_args(argv)
    params = launch_params(args)
    logger.info(
        "Starting dynamic form: form=%s lang=%s role=%s",
        params.form_kind,
        params.language,
        params.role,
    )

    app = QApplication.instance() or QApplication(sys.argv[:1])
    set_theme(args.theme)
    apply_app_palette(app)

    provider = ConfigProvider(Path(args.forms_dir) if args.forms_dir else None)
    panel = get_form_panel(params, provider)
    panel.resize(720, 860)
    panel.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())

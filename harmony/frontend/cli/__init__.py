from harmony.frontend.cli.app import render_board, run_check, run_generate

__all__ = ["render_board", "run_check", "run_generate"]

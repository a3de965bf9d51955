"""
Main entry point for the fuzzy decision demo.

This script loads the fuzzy variable definitions (the fuzzy_config.toml shipped
with fuzzycore unless --config is given), evaluates the current health and
enemy density, prints the membership degrees and crisp values of both
variables and the resulting action.
"""

import argparse
import logging
import sys
import tomllib

import numpy as np

from fuzzycore.config import DEFAULT_CONFIG_PATH, load_config
from fuzzycore.decision import DecisionMaker
from fuzzycore.errors import FuzzyCoreError
from utils.logger import set_sample_index, setup_logging


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="fuzzy-decide",
        description="Fuzzy fight-or-flee decision demo",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    ap.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="path to fuzzy_config.toml")
    ap.add_argument("--health", type=float, help="current health (default from [inputs])")
    ap.add_argument("--enemies", type=float, help="enemies nearby (default from [inputs])")
    ap.add_argument("--sweep", type=int, default=0,
                    help="evaluate N health values across the health range instead of one")
    ap.add_argument("--plot", action="store_true", help="plot both variables at the inputs")
    ap.add_argument("--log-dir", default=None, help="override [logging] LOG_DIR")
    return ap


def run(args) -> int:
    try:
        cfg = load_config(args.config)
    except (OSError, tomllib.TOMLDecodeError) as e:
        # config unreadable: default logging settings
        setup_logging(log_dir=args.log_dir or "logs")
        logging.getLogger("main").critical(
            "Cannot load configuration '%s': %s", args.config, e, exc_info=True
        )
        return 1

    log_cfg = cfg.get("logging", {})
    setup_logging(
        log_dir=args.log_dir or log_cfg.get("LOG_DIR", "logs"),
        overwrite=bool(log_cfg.get("OVERWRITE", True)),
        log_level=getattr(logging, log_cfg.get("LOG_LEVEL", "DEBUG")),
        console_level=getattr(logging, log_cfg.get("CONSOLE_LEVEL", "INFO")),
        cleanup_rotated=bool(log_cfg.get("CLEANUP_ROTATED", True)),
    )
    main_log = logging.getLogger("main")
    main_log.info("Application starting...")

    inputs = cfg.get("inputs", {})
    health = args.health if args.health is not None else float(inputs.get("health", 0.0))
    enemies = args.enemies if args.enemies is not None else float(inputs.get("enemies", 0.0))

    try:
        maker = DecisionMaker.from_config(cfg)
    except FuzzyCoreError as e:
        main_log.critical("Invalid fuzzy configuration: %s", e, exc_info=True)
        return 1

    if args.sweep > 0:
        lo, hi = maker.health.low.support()[0], maker.health.high.support()[1]
        samples = np.linspace(lo, hi, args.sweep)
    else:
        samples = [health]

    for i, h in enumerate(samples):
        set_sample_index(i)
        decision = maker.decide(float(h), enemies)
        print(f"health={float(h):.2f} enemies={enemies:.2f} -> Decision: {decision.action}")

    if args.plot:
        from utils.plot_membership_shapes import plot_variable
        plot_variable(maker.health, x=health)
        plot_variable(maker.enemies, x=enemies)

    main_log.info("Application finished.")
    return 0


def main() -> int:
    return run(build_parser().parse_args())


if __name__ == "__main__":
    sys.exit(main())

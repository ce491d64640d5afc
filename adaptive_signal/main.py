import argparse
import asyncio

from omegaconf import OmegaConf

from .common.config import ConfigManager
from .common.logging import setup_logger

def main():
    """
    Main entry point for the signal simulator.
    """
    parser = argparse.ArgumentParser(description="Adaptive Signal Simulator")
    parser.add_argument('module', choices=['server', 'auto'], help="Module to run")
    parser.add_argument('--config-dir', default="conf", help="Directory holding signal/<profile>.yaml")
    parser.add_argument('--profile', default="default", help="Config profile to load")
    parser.add_argument('--emergency', action='store_true', help="Start auto mode with emergency override engaged")

    args, unknown = parser.parse_known_args()

    # Load configuration and merge CLI overrides (e.g. signal.rules.peak_hour_bonus=7)
    signal_cfg = ConfigManager(args.config_dir).load_signal_config(args.profile)
    base_cfg = OmegaConf.create({"signal": signal_cfg})
    cli_cfg = OmegaConf.from_dotlist(unknown)
    cfg = OmegaConf.merge(base_cfg, cli_cfg)

    logger = setup_logger("adaptive_signal", cfg.signal.logging.level)
    logger.info(f"Starting module: {args.module}")

    if args.module == 'server':
        import uvicorn
        from .simulation.presentation.api import app, configure

        configure(cfg)
        server_cfg = cfg.signal.server
        logger.info(f"Starting server at http://{server_cfg.host}:{server_cfg.port}")
        uvicorn.run(app, host=server_cfg.host, port=server_cfg.port)
    elif args.module == 'auto':
        from .simulation.application.builder import SimulationApplicationBuilder

        controller = SimulationApplicationBuilder(cfg).build_controller()
        controller.set_emergency(args.emergency)
        logger.info("Starting auto-adaptive mode... Press Ctrl+C to exit.")
        try:
            asyncio.run(controller.run(max_cycles=cfg.signal.auto_mode.max_cycles))
        except KeyboardInterrupt:
            logger.info("Stopping auto mode...")

if __name__ == "__main__":
    main()

import hydra
import uvicorn
from omegaconf import DictConfig

from adaptive_signal.common.logging import setup_logger
from adaptive_signal.simulation.presentation.api import app, configure

@hydra.main(version_base=None, config_path="../conf", config_name="config")
def main(cfg: DictConfig):
    logger = setup_logger("adaptive_signal", cfg.signal.logging.level)
    logger.info("Configuration loaded.")

    configure(cfg)

    server_cfg = cfg.signal.get('server', {'host': '0.0.0.0', 'port': 8000})
    logger.info(f"Starting server at http://{server_cfg.host}:{server_cfg.port}")
    uvicorn.run(app, host=server_cfg.host, port=server_cfg.port)

if __name__ == "__main__":
    main()

"""
Plexus Portal — Main Entry Point

Pokreni s: python -m plexus_portal.main landing   (PORT, default 3005)
Ili:       python -m plexus_portal.main portal    (PORTAL_PORT, default 3006)
"""

import argparse
import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger("plexus_portal")


def setup_logging(level: str = "INFO"):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def main(argv=None):
    import uvicorn

    from plexus_portal.core.config import FiraConfig, LandingConfig, PortalConfig

    parser = argparse.ArgumentParser(prog="plexus-portal")
    parser.add_argument("app", choices=["landing", "portal"], nargs="?", default="landing")
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    if args.app == "landing":
        from plexus_portal.landing import create_app as create_landing

        cfg = LandingConfig.from_env()
        app = create_landing(cfg)
        logger.info("Med&X Landing Page → http://localhost:%d", cfg.port)
        host, port = cfg.host, cfg.port
    else:
        from plexus_portal.api.app import create_app as create_portal
        from plexus_portal.modules.fira import FiraClient

        fira_cfg = FiraConfig.from_env()
        cfg = PortalConfig.from_env()
        app = create_portal(FiraClient(fira_cfg), cfg)
        logger.info("Plexus Portal API → http://%s:%d", cfg.host, cfg.port)
        logger.info("   FIRA: %s (%s)", fira_cfg.api_url,
                    "konfigurirano" if fira_cfg.configured else "demo mod")
        host, port = cfg.host, cfg.port

    uvicorn.run(app, host=host, port=port, log_level=args.log_level.lower(), access_log=True)


if __name__ == "__main__":
    main()

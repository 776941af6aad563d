"""Assembly and entry point of the reservation service."""

import argparse
import logging
from pathlib import Path
from typing import Sequence

from flask import Flask

from ..config import load_config, parse_config
from ..loyalty.app import _open_pool
from ..postgres import Postgres, connect
from ..server import register_health, serve
from ..uuider import RandomUUIDer
from . import hotel_handlers, reservation_handlers
from .hotel_repo import HotelRepo
from .hotel_usecase import HotelUseCase
from .reservation_repo import ReservationRepo
from .reservation_usecase import ReservationUseCase

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = "config/config"


def create_app(db: Postgres) -> Flask:
    app = Flask(__name__)
    register_health(app)
    uuider = RandomUUIDer()
    hotels = HotelUseCase(HotelRepo(db), uuider)
    reservations = ReservationUseCase(ReservationRepo(db), uuider)
    app.register_blueprint(hotel_handlers.create_blueprint(hotels))
    app.register_blueprint(reservation_handlers.create_blueprint(reservations, hotels))
    return app


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="reservation-service", description="Reservation service API server."
    )
    parser.add_argument("--config", default=DEFAULT_CONFIG, help="config file path without extension")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    logger.info("Starting api server")

    path = Path(args.config)
    try:
        raw = load_config(path.name, path.parent)
    except Exception as error:
        logger.error("LoadConfig: %s", error)
        return 1
    try:
        config = parse_config(raw)
    except ValueError as error:
        logger.error("ParseConfig: %s", error)
        return 1
    try:
        db = connect(config, _open_pool)
    except ConnectionError as error:
        logger.error("Postgresql init: %s", error)
        return 1
    logger.info("Connected to database")

    try:
        serve(create_app(db), config.server)
    finally:
        db.close()
    return 0
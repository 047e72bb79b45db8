"""Punto de entrada principal para el paquete nuflo_monitor."""

import logging
import sys

from nuflo_monitor.cli import parse_args
from nuflo_monitor.generation import SamplingError
from nuflo_monitor.simulation import run_demo


def main() -> None:
    """Función principal que orquesta la demo.

    Parsea argumentos de línea de comandos y ejecuta la generación, el mapa y
    el reporte. Errores de configuración terminan con código 2.
    """
    try:
        args = parse_args()
        logging.basicConfig(level=str(args.log_level).upper(), format="%(levelname)s: %(message)s")
        run_demo(
            n_wells=args.wells,
            n_gateways=args.gateways,
            n_alerts=args.alerts,
            seed=args.seed,
            max_attempts=args.max_attempts or None,
            output_html=(args.output or None),
            summary_json=(args.summary_json or None),
            console_format=args.console_format,
            open_browser=bool(args.open),
        )
    except (ValueError, SamplingError) as e:
        logging.error(f"❌ {e}")
        sys.exit(2)


if __name__ == "__main__":
    main()

"""
Main entry point for rainwater harvesting assessment.

Runs a single assessment from command-line arguments or an input JSON file.
"""

import json
import random
import sys
from pathlib import Path
from typing import Optional, Dict, Any

from .core import Config, setup_logger, constants
from .engine import AssessmentEngine
from .exceptions import AssessmentValidationError
from .models import AssessmentInput, AssessmentResult
from .writer import ResultWriter


class RainwaterAssessmentApp:
    """Command-line application for rainwater harvesting assessment."""

    def __init__(self, config_file: Optional[str] = None, seed: Optional[int] = None):
        """
        Initialize application.

        Args:
            config_file: Path to configuration file
            seed: Random seed overriding the configured one
        """
        self.config = Config(config_file)

        self.logger = setup_logger(
            log_file=self.config.log_file,
            log_level=self.config.log_level
        )
        self.logger.debug(f"Configuration: {self.config}")

        if seed is None:
            seed = self.config.random_seed

        self.engine = AssessmentEngine(
            config=self.config,
            rng=random.Random(seed),
            logger=self.logger
        )
        self.writer = ResultWriter(timezone=self.config.report_timezone, logger=self.logger)

    def run(self, assessment: AssessmentInput, output_path: Optional[str] = None) -> AssessmentResult:
        """
        Assess a site and write the result.

        Args:
            assessment: Site parameters
            output_path: JSON output file; stdout when None

        Returns:
            The assessment result
        """
        result = self.engine.assess(assessment)
        self.writer.log_summary(result)
        self.writer.write_json(result, output_path)
        return result


def _load_input_file(path: str) -> Dict[str, Any]:
    with open(Path(path), "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise AssessmentValidationError([f"Input file must contain a JSON object: {path}"])
    return data


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Rooftop rainwater harvesting assessment"
    )
    parser.add_argument("--input", type=str, default=None,
                        help="JSON file with assessment input (overrides site flags)")
    parser.add_argument("--lat", type=float, default=constants.DEFAULT_LATITUDE,
                        help="Site latitude (degrees)")
    parser.add_argument("--lon", type=float, default=constants.DEFAULT_LONGITUDE,
                        help="Site longitude (degrees)")
    parser.add_argument("--roof-area", type=float, default=None,
                        help="Roof area (m²)")
    parser.add_argument("--roof-material", type=str, default="rcc",
                        help="Roof material: metal, tile, rcc, asphalt or thatch")
    parser.add_argument("--open-space", type=float, default=0.0,
                        help="Open ground available for recharge structures (m²)")
    parser.add_argument("--dwellers", type=int, default=None,
                        help="Household size")
    parser.add_argument("--consent", action="store_true",
                        help="Consent to store the assessment data")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for reproducible results")
    parser.add_argument("--output", type=str, default=None,
                        help="Output JSON file. Default: stdout")
    parser.add_argument("--config", type=str, default=None,
                        help="Path to configuration file")

    args = parser.parse_args(argv)

    try:
        if args.input:
            data = _load_input_file(args.input)
        else:
            if args.roof_area is None or args.dwellers is None:
                parser.error("--roof-area and --dwellers are required without --input")
            data = {
                "latitude": args.lat,
                "longitude": args.lon,
                "roof_area_m2": args.roof_area,
                "roof_material": args.roof_material,
                "open_space_m2": args.open_space,
                "dwellers": args.dwellers,
                "consent_to_store": args.consent,
            }
        assessment = AssessmentInput.from_dict(data)

        app = RainwaterAssessmentApp(config_file=args.config, seed=args.seed)
        app.run(assessment, output_path=args.output)
    except AssessmentValidationError as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        sys.exit(2)
    except Exception as e:
        print(f"Assessment failed: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()

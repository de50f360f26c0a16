# main-ELF.py
"""ELF seismic base shear runner across site classes."""
import logging
from pathlib import Path

from building_info_function import generate_configurations
from core.analysis_runner import AnalysisRunner
from core.errors import DegenerateGeometryError


def setup_logging():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def main():
    setup_logging()
    logger = logging.getLogger(__name__)

    # Define parameter space
    site_classes = ['A', 'B', 'C', 'D', 'E']

    # Fixed parameters
    raw_config = {
        "span_x": "4,4,4",
        "span_y": "4,3",
        "story_heights": "3.5,3.5,3.5",
        "level_loads": "1.5,2.0,2.0,1.0",
        "ss": 0.5,
        "s1": 0.2,
        "Ie": 1.0,
        "R": 8.0,
    }

    base_dir = Path(__file__).parent
    results_base = base_dir / "ELF_Results"
    runner = AnalysisRunner()

    for count, site_class in enumerate(site_classes, start=1):
        logger.info(f"[{count}/{len(site_classes)}] Running site class {site_class}")

        config = generate_configurations({**raw_config, "site_class": site_class})

        try:
            outcome = runner.run(config)
        except DegenerateGeometryError as e:
            logger.error(f"  Failed site class {site_class}: {e}")
            continue

        if not outcome.ok:
            logger.error(f"  Rejected site class {site_class}: {outcome.error}")
            continue

        result = outcome.result
        logger.info(f"  V = {result.V:.2f} T, forces = {result.point_loads_str}")
        runner.save_results(result, results_base / f"Site_{site_class}")

    logger.info(f"Completed all {len(site_classes)} site classes")


if __name__ == "__main__":
    main()

# (c) Copyright Datacraft, 2026
import importlib
import logging
from pathlib import Path

from fastapi import APIRouter

logger = logging.getLogger(__name__)


def discover_routers(core_path: Path) -> list[tuple[APIRouter, str]]:
	"""
	Find the ``router`` of every feature package under ``core_path/features``.

	Features are returned sorted by name; packages without a router module
	are skipped.
	"""
	routers = []
	features_path = core_path / "features"

	for router_file in sorted(features_path.glob("*/router.py")):
		feature_name = router_file.parent.name
		module = importlib.import_module(f"siteqc.core.features.{feature_name}.router")
		router = getattr(module, "router", None)
		if not isinstance(router, APIRouter):
			logger.warning(f"Feature {feature_name} has no APIRouter named 'router'")
			continue
		routers.append((router, feature_name))
		logger.debug(f"Router discovered: {feature_name}")

	return routers

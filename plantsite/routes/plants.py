# File: plantsite/routes/plants.py
"""
Plant pages.

Provides:
- GET /plants      : list every plant
- GET /plants/<id> : details for one plant
"""

import logging

from flask import Blueprint, render_template

from ..errors import error_response
from ..extensions import get_plant_service

logger = logging.getLogger(__name__)

bp = Blueprint('plants', __name__)


@bp.get('/plants')
def list_plants():
    try:
        plants = get_plant_service().get_plants()
    except Exception:
        logger.exception('Error getting plants')
        return error_response('unable to process request', 500)

    logger.info('Returning %d plants', len(plants))
    return render_template('plants.html', plants=plants)


@bp.get('/plants/<plant_id>')
def plant_details(plant_id: str):
    try:
        plant = get_plant_service().get_plant_by_id(plant_id)
    except Exception:
        logger.exception('Error getting plant %s', plant_id)
        return error_response('Failed to fetch plant details', 500)

    if plant is None:
        return render_template('404.html', message='Plant not found'), 404
    return render_template('plant_details.html', plant=plant)

# File: plantsite/routes/core.py
"""
Core routes.

Defines the landing redirect, the static-ish pages and the health check.
"""

from flask import Blueprint, current_app, jsonify, redirect, render_template, url_for

from ..about import __author__, __version__

bp = Blueprint('core', __name__)


@bp.get('/')
def root():
    return redirect(url_for('core.home'))


@bp.get('/home')
def home():
    """Render the main index page."""
    return render_template('index.html')


@bp.get('/tips')
def tips():
    return render_template('tips.html')


@bp.get('/health-check')
def health_check():
    """Report that the server is up, with repo info. Never cached."""
    response = jsonify(
        status='ok',
        author=__author__,
        githubUrl=current_app.config['GITHUB_URL'],
        version=__version__,
    )
    response.headers['Cache-Control'] = 'no-cache'
    return response

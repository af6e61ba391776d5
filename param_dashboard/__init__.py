"""
Parameter Dashboard

Sliders generated from parameter tables and a delimited-file upload preview,
served by Flask.
"""
from .dashboard_app import DashboardApp, create_app

__version__ = '0.1.0'

__all__ = ['DashboardApp', 'create_app']

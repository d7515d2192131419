"""Command-line front end for banner_formatter"""

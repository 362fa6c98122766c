"""Umami analytics integration for Wagtail sites"""

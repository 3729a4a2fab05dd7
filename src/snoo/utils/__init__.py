"""Shared utilities for snoo"""

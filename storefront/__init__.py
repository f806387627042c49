"""Klarna checkout demo storefront"""

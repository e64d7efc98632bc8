"""SIOPAmb: Sistema de Informações Operacionais do Policiamento Ambiental.

This package is organized by feature modules (accounts, credentials, reports,
auth, routing, stats, transfer) with a thin Flask controller layer over
service/repository layers.
"""

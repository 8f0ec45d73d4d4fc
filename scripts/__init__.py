"""Helper scripts for operating the service bootstrap layer"""

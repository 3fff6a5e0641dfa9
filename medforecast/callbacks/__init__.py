"""
Callbacks de Dash

Se registran al importar el modulo (decorador dash.callback).
"""

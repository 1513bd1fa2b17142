"""
Domain layer.

Books, users and their loan histories, with the rules that govern lending.
Nothing here imports a framework or touches storage.
"""

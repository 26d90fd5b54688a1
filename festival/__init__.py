"""
Tapster festival package.

Layered the same way throughout:

  festival/models/        catalog and user-log records (drinks, festivals,
                          festival-log items) with their JSON mappings.
  festival/storage/       pure I/O: the JSON preferences file.
  festival/services/      one concern each: remote catalog fetches, local
                          favorites / ratings / tasting log / selection,
                          and pure filter and sort helpers.
  festival/repositories/  the contracts the front end depends on and the
                          implementations that compose the services.

``FestivalBrowser`` (in ``tapster.py``) is the integration point: it wires
services into repositories and keeps the session state for the CLI.
"""

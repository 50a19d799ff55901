"""
Constantes globales pour tvmaze-client.

Ce module contient les constantes de l'API TVmaze:
- Adresse de base par defaut
- Noms des parametres de requete partages
- Timeouts par defaut du transport HTTP
"""

# Adresse de base de l'API (surchargeable pour les tests ou un miroir)
DEFAULT_API_ADDRESS = "http://api.tvmaze.com"

# Pays utilise par le service quand le parametre country est absent
DEFAULT_COUNTRY = "US"

# Format ISO 8601 des parametres date, independant de la locale
DATE_FORMAT = "%Y-%m-%d"

# Parametres de requete
API_KEY_PARAMETER = "apikey"
EMBED_PARAMETER = "embed"
EMBED_LIST_PARAMETER = "embed[]"

# Timeouts par defaut du transport HTTP (secondes)
DEFAULT_TIMEOUT = 30.0
DEFAULT_CONNECT_TIMEOUT = 10.0

"""
Couche domaine (core).

Contient les enregistrements types, les options et les erreurs du client.
Cette couche ne depend pas du transport HTTP (hormis le type de reponse
httpx porte par TVMazeHTTPError).

Sous-modules :
- entities/ : Enregistrements TVmaze (Show, Episode, Person...)
- options.py : Options immutables du client (TVMazeOptions, ProductInfo)
- errors.py : Hierarchie des erreurs du client
"""

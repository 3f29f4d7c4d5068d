# Diceware passphrase generator and service

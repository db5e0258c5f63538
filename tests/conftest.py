import os

# keep CLI runs from creating logs/ in the working tree
os.environ.setdefault("BELNAPIAN_DISABLE_FILE_LOGS", "1")

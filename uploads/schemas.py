from ninja import Schema

class UploadOut(Schema):
    # Редактор ожидает публичный URL в поле location
    location: str

class UploadErrorOut(Schema):
    error: str

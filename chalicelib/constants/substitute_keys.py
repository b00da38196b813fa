from_db = {
    'id_': 'id',
    'record_type': None
}

# Seed data served until a collection is written for the first time

DEFAULT_VEHICLES = [
    {'id': 'v1', 'name': 'Honda City', 'number': 'DL-01-AB-1234', 'type': 'Sedan', 'status': 'active'},
    {'id': 'v2', 'name': 'Maruti Swift', 'number': 'DL-02-CD-5678', 'type': 'Hatchback', 'status': 'active'},
    {'id': 'v3', 'name': 'Hyundai i20', 'number': 'DL-03-EF-9012', 'type': 'Hatchback', 'status': 'active'},
]

DEFAULT_TRAINERS = [
    {'id': 't1', 'name': 'Rajesh Kumar', 'phone': '+91-98765-43210', 'experience': '10 years', 'status': 'active'},
    {'id': 't2', 'name': 'Priya Sharma', 'phone': '+91-98765-43211', 'experience': '8 years', 'status': 'active'},
    {'id': 't3', 'name': 'Amit Singh', 'phone': '+91-98765-43212', 'experience': '12 years', 'status': 'active'},
]

DEFAULT_LOCATION = {
    'address': '123 Main Street, City, State 12345',
    'phone': '+1 (555) 123-4567',
    'hours': 'Mon-Fri: 9AM-6PM, Sat: 10AM-4PM',
    'latitude': 28.6139,
    'longitude': 77.2090,
    'zoom': 15,
}

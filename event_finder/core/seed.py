"""Sample events loaded when the service starts.

Creation payloads in wire format; the store assigns ids and timestamps.
"""

from typing import Any


SAMPLE_EVENTS: list[dict[str, Any]] = [
    {
        "title": "Tech Meetup: AI & Machine Learning",
        "description": "Join us for an exciting discussion on the latest trends in AI and ML. Network with fellow tech enthusiasts!",
        "location": "Bangalore, India",
        "date": "2025-11-15T18:00:00Z",
        "maxParticipants": 50,
        "latitude": 12.9716,
        "longitude": 77.5946,
        "category": "Technology",
    },
    {
        "title": "Weekend Hiking Adventure",
        "description": "Explore the beautiful trails around Nandi Hills. Perfect for beginners and experienced hikers.",
        "location": "Nandi Hills, Bangalore",
        "date": "2025-11-08T06:00:00Z",
        "maxParticipants": 20,
        "latitude": 13.3704,
        "longitude": 77.6838,
        "category": "Outdoor",
    },
    {
        "title": "Startup Founders Networking",
        "description": "Connect with fellow entrepreneurs, share experiences, and build meaningful relationships.",
        "location": "Koramangala, Bangalore",
        "date": "2025-11-10T19:00:00Z",
        "maxParticipants": 30,
        "latitude": 12.9352,
        "longitude": 77.6245,
        "category": "Business",
    },
    {
        "title": "Photography Workshop",
        "description": "Learn professional photography techniques from industry experts. Bring your camera!",
        "location": "MG Road, Bangalore",
        "date": "2025-11-12T10:00:00Z",
        "maxParticipants": 25,
        "latitude": 12.9759,
        "longitude": 77.6061,
        "category": "Arts",
    },
    {
        "title": "Sunday Football Match",
        "description": "Friendly football match. All skill levels welcome. Just bring your energy!",
        "location": "Cubbon Park, Bangalore",
        "date": "2025-11-09T07:00:00Z",
        "maxParticipants": 22,
        "latitude": 12.9763,
        "longitude": 77.5993,
        "category": "Sports",
    },
    {
        "title": "Cooking Class: Indian Cuisine",
        "description": "Master the art of traditional Indian cooking with Chef Rajesh.",
        "location": "Indiranagar, Bangalore",
        "date": "2025-11-11T16:00:00Z",
        "maxParticipants": 15,
        "latitude": 12.9719,
        "longitude": 77.6412,
        "category": "Food",
    },
    {
        "title": "Yoga & Meditation Session",
        "description": "Start your day with peace and mindfulness. Suitable for all levels.",
        "location": "Lalbagh, Bangalore",
        "date": "2025-11-07T06:30:00Z",
        "maxParticipants": 40,
        "latitude": 12.9507,
        "longitude": 77.5848,
        "category": "Wellness",
    },
    {
        "title": "Book Club: Monthly Meetup",
        "description": 'Discussing "The Midnight Library" this month. Coffee and snacks provided.',
        "location": "Church Street, Bangalore",
        "date": "2025-11-14T18:30:00Z",
        "maxParticipants": 20,
        "latitude": 12.9716,
        "longitude": 77.6069,
        "category": "Education",
    },
]

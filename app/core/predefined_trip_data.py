"""미리 작성된 여행 템플릿 원본 데이터.

키는 템플릿 ID이며 값은 `TripTemplate` 스키마(camelCase)를 따릅니다.
"""

from typing import Any


def _activity(time_of_day: str, location: str, description: str, notes: str) -> dict[str, str]:
    return {"timeOfDay": time_of_day, "location": location, "description": description, "notes": notes}


PREDEFINED_TRIP_DATA: dict[str, dict[str, Any]] = {
    "paris-adventure": {
        "tripId": "paris-adventure",
        "destination": "Paris, France",
        "duration": 5,
        "numTravelers": 2,
        "interests": ["History", "Art", "Food", "Culture"],
        "budget": "mid-range",
        "travelStyle": "relaxed",
        "foodPreference": "not-specified",
        "itinerary": [
            {
                "day": 1,
                "activities": [
                    _activity(
                        "Morning",
                        "Flight to Paris",
                        "Departure flight to Paris Charles de Gaulle Airport (CDG)",
                        "Arrive at the airport 3 hours before departure",
                    ),
                    _activity(
                        "Afternoon",
                        "Arrival in Paris",
                        "Arrive at Paris Charles de Gaulle Airport (CDG)",
                        "Take the RER B train or taxi to your hotel",
                    ),
                    _activity(
                        "Evening",
                        "Hotel Check-in",
                        "Check in to your hotel and rest after the flight",
                        "Consider having dinner at a nearby restaurant",
                    ),
                ],
            },
            {
                "day": 2,
                "activities": [
                    _activity(
                        "Morning",
                        "Eiffel Tower",
                        "Start your Paris adventure with a visit to the iconic Eiffel Tower. "
                        "Take in the breathtaking views of the city from the top.",
                        "Book tickets in advance to avoid long queues",
                    ),
                    _activity(
                        "Lunch",
                        "Le Marais",
                        "Explore the historic Le Marais district and enjoy lunch at a traditional French bistro.",
                        "Try the local specialties like croque-monsieur or quiche",
                    ),
                    _activity(
                        "Afternoon",
                        "Louvre Museum",
                        "Visit the world-famous Louvre Museum to see masterpieces like the Mona Lisa "
                        "and Venus de Milo.",
                        "Free entry on first Sunday of each month",
                    ),
                    _activity(
                        "Evening",
                        "Seine River Cruise",
                        "Take a romantic evening cruise along the Seine River, admiring the illuminated monuments.",
                        "Best views during sunset",
                    ),
                ],
            },
            {
                "day": 3,
                "activities": [
                    _activity(
                        "Morning",
                        "Notre-Dame Cathedral",
                        "Visit the magnificent Notre-Dame Cathedral and explore its stunning architecture.",
                        "Currently under restoration, but still worth visiting",
                    ),
                    _activity(
                        "Lunch",
                        "Latin Quarter",
                        "Enjoy lunch in the vibrant Latin Quarter, known for its student life and charming cafes.",
                        "Try the local bistros and patisseries",
                    ),
                    _activity(
                        "Afternoon",
                        "Sainte-Chapelle",
                        "Admire the stunning stained glass windows of Sainte-Chapelle.",
                        "Combined ticket available with Conciergerie",
                    ),
                    _activity(
                        "Evening",
                        "Montmartre",
                        "Explore the artistic neighborhood of Montmartre and enjoy dinner with a view of the city.",
                        "Visit Sacré-Cœur for sunset views",
                    ),
                ],
            },
            {
                "day": 4,
                "activities": [
                    _activity(
                        "Morning",
                        "Palace of Versailles",
                        "Take a day trip to the magnificent Palace of Versailles.",
                        "Book tickets in advance and arrive early to avoid crowds",
                    ),
                    _activity(
                        "Lunch",
                        "Versailles Gardens",
                        "Enjoy a picnic lunch in the beautiful gardens of Versailles.",
                        "Bring your own food or purchase from local vendors",
                    ),
                    _activity(
                        "Afternoon",
                        "Grand Trianon",
                        "Visit the Grand Trianon and Marie Antoinette's Estate.",
                        "Included in the Palace ticket",
                    ),
                    _activity(
                        "Evening",
                        "Return to Paris",
                        "Return to Paris and enjoy dinner in a local restaurant.",
                        "Consider dining in the Saint-Germain-des-Prés area",
                    ),
                ],
            },
            {
                "day": 5,
                "activities": [
                    _activity(
                        "Morning",
                        "Hotel Check-out",
                        "Check out from your hotel and store luggage if needed",
                        "Most hotels offer luggage storage service",
                    ),
                    _activity(
                        "Afternoon",
                        "Last-minute Shopping",
                        "Visit Galeries Lafayette or other shopping areas for souvenirs",
                        "Don't forget to get your VAT refund if eligible",
                    ),
                    _activity(
                        "Evening",
                        "Flight Home",
                        "Transfer to Charles de Gaulle Airport (CDG) for your return flight",
                        "Arrive at the airport 3 hours before departure",
                    ),
                ],
            },
        ],
        "hotels": [
            {
                "name": "Hotel Le Bristol Paris",
                "priceRange": "mid-range",
                "description": "Luxury hotel in the heart of Paris, near the Champs-Élysées",
                "location": "112 rue du Faubourg Saint Honoré, 75008 Paris",
                "website": "https://www.oetkercollection.com/hotels/le-bristol-paris/",
            },
            {
                "name": "Hotel Lutetia",
                "priceRange": "mid-range",
                "description": "Art Deco hotel in the Saint-Germain-des-Prés district",
                "location": "45 Boulevard Raspail, 75006 Paris",
                "website": "https://www.hotellutetia.com/",
            },
            {
                "name": "Hotel Plaza Athénée",
                "priceRange": "mid-range",
                "description": "Iconic luxury hotel with views of the Eiffel Tower",
                "location": "25 Avenue Montaigne, 75008 Paris",
                "website": "https://www.dorchestercollection.com/en/paris/hotel-plaza-athenee/",
            },
        ],
        "generalTips": [
            "Purchase a Paris Museum Pass for discounted entry to major attractions",
            "Use the Metro for convenient transportation around the city",
            "Book restaurant reservations in advance, especially for popular places",
            "Be aware of pickpockets in tourist areas",
            "Consider purchasing a Paris Visite travel card for unlimited public transport",
            "Book airport transfers in advance for convenience",
            "Check flight schedules and book tickets early for better prices",
        ],
    },
    "tokyo-explorer": {
        "tripId": "tokyo-explorer",
        "destination": "Tokyo, Japan",
        "duration": 8,
        "numTravelers": 2,
        "interests": ["Culture", "Food", "Technology", "Shopping"],
        "budget": "mid-range",
        "travelStyle": "fast-paced",
        "foodPreference": "not-specified",
        "itinerary": [
            {
                "day": 1,
                "activities": [
                    _activity(
                        "Morning",
                        "Flight to Tokyo",
                        "Departure flight to Tokyo Narita International Airport (NRT)",
                        "Arrive at the airport 3 hours before departure",
                    ),
                    _activity(
                        "Evening",
                        "Arrival in Tokyo",
                        "Arrive at Tokyo Narita International Airport (NRT)",
                        "Take the Narita Express or limousine bus to your hotel",
                    ),
                ],
            },
            {
                "day": 2,
                "activities": [
                    _activity(
                        "Morning",
                        "Senso-ji Temple",
                        "Start your Tokyo adventure at the oldest Buddhist temple in Tokyo.",
                        "Visit early morning to avoid crowds",
                    ),
                    _activity(
                        "Lunch",
                        "Asakusa",
                        "Explore the traditional district of Asakusa and enjoy authentic Japanese cuisine.",
                        "Try the local street food and tempura restaurants",
                    ),
                    _activity(
                        "Afternoon",
                        "Tokyo Skytree",
                        "Visit the tallest structure in Japan for panoramic views of Tokyo.",
                        "Book tickets in advance for better prices",
                    ),
                    _activity(
                        "Evening",
                        "Odaiba",
                        "Experience the futuristic entertainment district of Odaiba.",
                        "Great for shopping and dining with a view",
                    ),
                ],
            },
            {
                "day": 3,
                "activities": [
                    _activity(
                        "Morning",
                        "Tsukiji Outer Market",
                        "Explore the famous fish market and enjoy fresh sushi for breakfast.",
                        "Arrive early for the best selection",
                    ),
                    _activity(
                        "Lunch",
                        "Ginza",
                        "Visit Tokyo's upscale shopping district and enjoy lunch at a high-end restaurant.",
                        "Many department stores have excellent food halls",
                    ),
                    _activity(
                        "Afternoon",
                        "Imperial Palace",
                        "Tour the beautiful gardens of the Imperial Palace.",
                        "Book guided tours in advance",
                    ),
                    _activity(
                        "Evening",
                        "Shibuya",
                        "Experience the famous Shibuya Crossing and vibrant nightlife.",
                        "Visit the Hachiko statue and enjoy the neon lights",
                    ),
                ],
            },
            {
                "day": 4,
                "activities": [
                    _activity(
                        "Morning",
                        "Asakusa",
                        "Visit the traditional district of Asakusa and explore its local markets.",
                        "Try the local street food and souvenirs",
                    ),
                    _activity(
                        "Lunch",
                        "Ginza",
                        "Visit Tokyo's upscale shopping district and enjoy lunch at a high-end restaurant.",
                        "Many department stores have excellent food halls",
                    ),
                    _activity(
                        "Afternoon",
                        "Ueno",
                        "Visit the Ueno Royal Museum and enjoy the art collections.",
                        "Free entry on weekends",
                    ),
                    _activity(
                        "Evening",
                        "Shinjuku",
                        "Explore the vibrant nightlife of Shinjuku and visit a local izakaya.",
                        "Try the local specialties and trendy bars",
                    ),
                ],
            },
            {
                "day": 5,
                "activities": [
                    _activity(
                        "Morning",
                        "Akihabara",
                        "Visit the electronics and anime district of Akihabara.",
                        "Explore the many shops and arcades",
                    ),
                    _activity(
                        "Lunch",
                        "Kanda",
                        "Enjoy lunch in the historic Kanda district and visit the local shrine.",
                        "Try the local specialties and traditional sweets",
                    ),
                    _activity(
                        "Afternoon",
                        "Tokyo Station",
                        "Visit Tokyo Station and explore its architecture and local markets.",
                        "Try the local food and souvenirs",
                    ),
                    _activity(
                        "Evening",
                        "Shibuya",
                        "Experience the famous Shibuya Crossing and vibrant nightlife.",
                        "Visit the Hachiko statue and enjoy the neon lights",
                    ),
                ],
            },
            {
                "day": 6,
                "activities": [
                    _activity(
                        "Morning",
                        "Hakone",
                        "Take a scenic train ride to Hakone and enjoy the natural beauty.",
                        "Visit the Hakone Shrine and Lake Ashi",
                    ),
                    _activity(
                        "Lunch",
                        "Odawara",
                        "Enjoy lunch in the charming town of Odawara and visit the local shrine.",
                        "Try the local specialties and traditional sweets",
                    ),
                    _activity(
                        "Afternoon",
                        "Tobu Railway Museum",
                        "Visit the Tobu Railway Museum and learn about Japanese railway history.",
                        "Free entry on weekends",
                    ),
                    _activity(
                        "Evening",
                        "Shinkansen",
                        "Take a Shinkansen bullet train to Kyoto.",
                        "Enjoy the high-speed train journey",
                    ),
                ],
            },
            {
                "day": 7,
                "activities": [
                    _activity(
                        "Morning",
                        "Kyoto",
                        "Start your day in Kyoto and visit the famous Fushimi Inari Shrine.",
                        "Try to visit early in the morning to avoid crowds",
                    ),
                    _activity(
                        "Lunch",
                        "Pontocho",
                        "Enjoy lunch in the charming Pontocho district and visit the local shrine.",
                        "Try the local specialties and traditional sweets",
                    ),
                    _activity(
                        "Afternoon",
                        "Kinkaku-ji",
                        "Visit the Golden Pavilion and enjoy its unique architecture.",
                        "Free entry on weekends",
                    ),
                    _activity(
                        "Evening",
                        "Arashiyama",
                        "Enjoy a peaceful walk in the Arashiyama district and visit the local temples.",
                        "Try the local specialties and traditional sweets",
                    ),
                ],
            },
            {
                "day": 8,
                "activities": [
                    _activity(
                        "Morning",
                        "Hotel Check-out",
                        "Check out from your hotel and store luggage if needed",
                        "Most hotels offer luggage storage service",
                    ),
                    _activity(
                        "Afternoon",
                        "Last-minute Shopping",
                        "Visit Ginza or other shopping areas for souvenirs",
                        "Don't forget to get your tax-free shopping documents",
                    ),
                    _activity(
                        "Evening",
                        "Flight Home",
                        "Transfer to Narita International Airport (NRT) for your return flight",
                        "Arrive at the airport 3 hours before departure",
                    ),
                ],
            },
        ],
        "hotels": [
            {
                "name": "The Peninsula Tokyo",
                "priceRange": "mid-range",
                "description": "Luxury hotel in the heart of Marunouchi district",
                "location": "1-8-1 Yurakucho, Chiyoda-ku, Tokyo 100-0006",
                "website": "https://www.peninsula.com/en/tokyo",
            },
            {
                "name": "Mandarin Oriental Tokyo",
                "priceRange": "mid-range",
                "description": "Five-star hotel in the Nihonbashi district",
                "location": "2-1-1 Nihonbashi Muromachi, Chuo-ku, Tokyo 103-8328",
                "website": "https://www.mandarinoriental.com/tokyo",
            },
            {
                "name": "Park Hotel Tokyo",
                "priceRange": "mid-range",
                "description": "Art-focused hotel in the Shiodome district",
                "location": "1-7-1 Higashi-Shimbashi, Minato-ku, Tokyo 105-7227",
                "website": "https://www.parkhoteltokyo.com/",
            },
        ],
        "generalTips": [
            "Purchase a Japan Rail Pass before arriving in Japan",
            "Get a Suica or Pasmo card for convenient public transportation",
            "Learn basic Japanese phrases for better interaction with locals",
            "Carry cash as many places don't accept credit cards",
            "Download offline maps and translation apps",
        ],
    },
    "bali-paradise": {
        "tripId": "bali-paradise",
        "destination": "Bali, Indonesia",
        "duration": 5,
        "numTravelers": 2,
        "interests": ["Beach", "Culture", "Nature", "Relaxation"],
        "budget": "mid-range",
        "travelStyle": "relaxed",
        "foodPreference": "not-specified",
        "itinerary": [
            {
                "day": 1,
                "activities": [
                    _activity(
                        "Morning",
                        "Flight to Bali",
                        "Departure flight to Ngurah Rai International Airport (DPS)",
                        "Arrive at the airport 3 hours before departure",
                    ),
                    _activity(
                        "Evening",
                        "Arrival in Bali",
                        "Arrive at Ngurah Rai International Airport (DPS)",
                        "Take a taxi or arrange hotel transfer to your accommodation",
                    ),
                ],
            },
            {
                "day": 2,
                "activities": [
                    _activity(
                        "Morning",
                        "Ubud Monkey Forest",
                        "Start your Bali adventure with a visit to the sacred monkey forest sanctuary.",
                        "Keep belongings secure from curious monkeys",
                    ),
                    _activity(
                        "Lunch",
                        "Ubud Palace",
                        "Explore the royal palace and enjoy traditional Balinese cuisine.",
                        "Try the local warungs for authentic food",
                    ),
                    _activity(
                        "Afternoon",
                        "Tegallalang Rice Terraces",
                        "Visit the famous rice terraces and learn about traditional farming methods.",
                        "Best photo opportunities in the morning or late afternoon",
                    ),
                    _activity(
                        "Evening",
                        "Ubud Art Market",
                        "Browse local crafts and souvenirs at the traditional market.",
                        "Remember to bargain for better prices",
                    ),
                ],
            },
            {
                "day": 3,
                "activities": [
                    _activity(
                        "Morning",
                        "Mount Batur",
                        "Early morning hike to watch the sunrise from the volcano.",
                        "Start the hike around 4 AM for sunrise views",
                    ),
                    _activity(
                        "Lunch",
                        "Kintamani",
                        "Enjoy lunch with a view of the volcano and Lake Batur.",
                        "Try the local specialty, Babi Guling",
                    ),
                    _activity(
                        "Afternoon",
                        "Tirta Empul Temple",
                        "Visit the holy water temple and participate in the purification ritual.",
                        "Bring a change of clothes for the water ritual",
                    ),
                    _activity(
                        "Evening",
                        "Ubud",
                        "Relax with a traditional Balinese massage and spa treatment.",
                        "Book spa treatments in advance",
                    ),
                ],
            },
            {
                "day": 4,
                "activities": [
                    _activity(
                        "Morning",
                        "Sacred Monkey Forest Sanctuary",
                        "Visit the Sacred Monkey Forest Sanctuary and see the playful monkeys.",
                        "Keep belongings secure from curious monkeys",
                    ),
                    _activity(
                        "Lunch",
                        "Ubud",
                        "Enjoy lunch in Ubud and explore its local markets.",
                        "Try the local specialties and traditional sweets",
                    ),
                    _activity(
                        "Afternoon",
                        "Tegallalang Rice Terraces",
                        "Visit the famous Tegallalang Rice Terraces and learn about traditional farming methods.",
                        "Best photo opportunities in the morning or late afternoon",
                    ),
                    _activity(
                        "Evening",
                        "Ubud",
                        "Enjoy a traditional Balinese dinner and watch a cultural dance performance.",
                        "Try the local specialties and traditional sweets",
                    ),
                ],
            },
            {
                "day": 5,
                "activities": [
                    _activity(
                        "Morning",
                        "Hotel Check-out",
                        "Check out from your hotel and store luggage if needed",
                        "Most hotels offer luggage storage service",
                    ),
                    _activity(
                        "Afternoon",
                        "Last-minute Shopping",
                        "Visit local markets for souvenirs and gifts",
                        "Remember to bargain for better prices",
                    ),
                    _activity(
                        "Evening",
                        "Flight Home",
                        "Transfer to Ngurah Rai International Airport (DPS) for your return flight",
                        "Arrive at the airport 3 hours before departure",
                    ),
                ],
            },
        ],
        "hotels": [
            {
                "name": "Four Seasons Resort Bali at Sayan",
                "priceRange": "mid-range",
                "description": "Luxury resort in the heart of Ubud",
                "location": "Sayan, Ubud, Bali 80571, Indonesia",
                "website": "https://www.fourseasons.com/sayan/",
            },
            {
                "name": "Hanging Gardens of Bali",
                "priceRange": "mid-range",
                "description": "Unique resort with private infinity pools",
                "location": "Desa Buahan, Payangan, Ubud, Bali 80571, Indonesia",
                "website": "https://www.hanginggardensofbali.com/",
            },
            {
                "name": "Munduk Moding Plantation",
                "priceRange": "mid-range",
                "description": "Boutique resort with stunning views",
                "location": "Banjar Dinas Asah, Desa Gobleg, Kecamatan Banjar, Buleleng, Bali 81152, Indonesia",
                "website": "https://www.mundukmodingplantation.com/",
            },
        ],
        "generalTips": [
            "Rent a scooter for convenient transportation",
            "Respect local customs and dress modestly when visiting temples",
            "Carry cash for small purchases and tips",
            "Book popular activities and restaurants in advance",
            "Be prepared for occasional rain showers",
        ],
    },
}

"""
Built-in sample menu, installed when no CSV source is available.
"""

SAMPLE_MENU = [
    {
        "Name": "Espresso",
        "Category": "Beverage",
        "Flavor": "Strong",
        "Description": "Concentrated coffee brewed by forcing hot water under pressure through finely ground coffee beans.",
    },
    {
        "Name": "Cappuccino",
        "Category": "Beverage",
        "Flavor": "Sweet",
        "Description": "Coffee drink with steamed milk foam, typically equal parts espresso, steamed milk, and milk foam.",
    },
    {
        "Name": "Iced Tea",
        "Category": "Beverage",
        "Flavor": "Refreshing",
        "Description": "Chilled tea served with ice, sometimes flavored with lemon or peach.",
    },
    {
        "Name": "Margherita Pizza",
        "Category": "Food",
        "Flavor": "Savory",
        "Description": "Classic pizza with tomato sauce, mozzarella cheese, and fresh basil.",
    },
    {
        "Name": "Buffalo Wings",
        "Category": "Food",
        "Flavor": "Spicy",
        "Description": "Chicken wings coated in a spicy sauce, served with celery and blue cheese dressing.",
    },
    {
        "Name": "Pasta Alfredo",
        "Category": "Food",
        "Flavor": "Creamy",
        "Description": "Fettuccine tossed with a rich sauce of butter, cream, and Parmesan cheese.",
    },
]

SAMPLE_SOURCE = "sample"

# Bundled disease catalog. Loaded into the store by database.init_db(), keyed on name.

DISEASES = [
    {
        "name": "Common Cold",
        "description": "A viral infection of the upper respiratory tract",
        "symptoms": ["runny nose", "sneezing", "cough", "sore throat", "congestion", "mild headache"],
        "causes": ["Rhinovirus", "Coronavirus", "Respiratory syncytial virus"],
        "precautions": ["Rest", "Stay hydrated", "Avoid close contact with others", "Cover mouth when coughing"],
        "medicines": ["Pain relievers", "Decongestants", "Throat lozenges", "Vitamin C"],
        "severity": "low",
        "category": "Respiratory",
    },
    {
        "name": "Influenza",
        "description": "A viral infection that attacks the respiratory system",
        "symptoms": ["fever", "chills", "muscle aches", "cough", "congestion", "runny nose", "headache", "fatigue"],
        "causes": ["Influenza A virus", "Influenza B virus", "Influenza C virus"],
        "precautions": ["Get annual flu vaccine", "Wash hands frequently", "Avoid crowds during flu season", "Stay home when sick"],
        "medicines": ["Antiviral medications", "Pain relievers", "Fever reducers", "Rest and fluids"],
        "severity": "medium",
        "category": "Respiratory",
    },
    {
        "name": "Migraine",
        "description": "A neurological condition causing severe headaches",
        "symptoms": ["severe headache", "nausea", "vomiting", "sensitivity to light", "sensitivity to sound", "visual disturbances"],
        "causes": ["Stress", "Hormonal changes", "Certain foods", "Sleep changes", "Weather changes"],
        "precautions": ["Identify triggers", "Maintain regular sleep schedule", "Manage stress", "Stay hydrated"],
        "medicines": ["Triptans", "Pain relievers", "Anti-nausea medications", "Preventive medications"],
        "severity": "medium",
        "category": "Neurological",
    },
    {
        "name": "Gastroenteritis",
        "description": "Inflammation of the stomach and intestines",
        "symptoms": ["nausea", "vomiting", "diarrhea", "stomach cramps", "fever", "loss of appetite"],
        "causes": ["Viral infection", "Bacterial infection", "Food poisoning", "Parasites"],
        "precautions": ["Stay hydrated", "Eat bland foods", "Avoid dairy", "Practice good hygiene"],
        "medicines": ["Oral rehydration solutions", "Anti-diarrheal medications", "Probiotics", "Electrolyte supplements"],
        "severity": "medium",
        "category": "Gastrointestinal",
    },
    {
        "name": "Hypertension",
        "description": "High blood pressure condition",
        "symptoms": ["headache", "dizziness", "shortness of breath", "chest pain", "visual changes", "fatigue"],
        "causes": ["Poor diet", "Lack of exercise", "Stress", "Genetics", "Age", "Obesity"],
        "precautions": ["Regular exercise", "Healthy diet", "Limit sodium", "Manage stress", "Avoid smoking"],
        "medicines": ["ACE inhibitors", "Diuretics", "Beta blockers", "Calcium channel blockers"],
        "severity": "high",
        "category": "Cardiovascular",
    },
    {
        "name": "Diabetes Type 2",
        "description": "A metabolic disorder characterized by high blood sugar",
        "symptoms": ["increased thirst", "frequent urination", "fatigue", "blurred vision", "slow healing", "numbness"],
        "causes": ["Insulin resistance", "Poor diet", "Obesity", "Genetics", "Sedentary lifestyle"],
        "precautions": ["Healthy diet", "Regular exercise", "Weight management", "Regular monitoring"],
        "medicines": ["Metformin", "Insulin", "Sulfonylureas", "DPP-4 inhibitors"],
        "severity": "high",
        "category": "Endocrine",
    },
    {
        "name": "Asthma",
        "description": "A respiratory condition causing difficulty breathing",
        "symptoms": ["shortness of breath", "wheezing", "chest tightness", "cough", "rapid breathing"],
        "causes": ["Allergens", "Air pollution", "Exercise", "Stress", "Weather changes", "Genetics"],
        "precautions": ["Avoid triggers", "Use prescribed inhalers", "Regular checkups", "Air quality monitoring"],
        "medicines": ["Bronchodilators", "Corticosteroids", "Leukotriene modifiers", "Rescue inhalers"],
        "severity": "medium",
        "category": "Respiratory",
    },
    {
        "name": "Pneumonia",
        "description": "An infection that inflames air sacs in lungs",
        "symptoms": ["chest pain", "fever", "chills", "cough", "shortness of breath", "fatigue", "confusion"],
        "causes": ["Bacterial infection", "Viral infection", "Fungal infection", "Aspiration"],
        "precautions": ["Get vaccinated", "Practice good hygiene", "Don't smoke", "Boost immunity"],
        "medicines": ["Antibiotics", "Antivirals", "Pain relievers", "Oxygen therapy"],
        "severity": "high",
        "category": "Respiratory",
    },
    {
        "name": "Urinary Tract Infection",
        "description": "An infection in any part of the urinary system",
        "symptoms": ["burning urination", "frequent urination", "cloudy urine", "pelvic pain", "strong-smelling urine"],
        "causes": ["Bacterial infection", "Poor hygiene", "Sexual activity", "Kidney stones"],
        "precautions": ["Stay hydrated", "Urinate after intercourse", "Wipe front to back", "Avoid irritants"],
        "medicines": ["Antibiotics", "Pain relievers", "Urinary alkalizers", "Cranberry supplements"],
        "severity": "medium",
        "category": "Urological",
    },
    {
        "name": "Depression",
        "description": "A mental health disorder causing persistent sadness",
        "symptoms": ["persistent sadness", "loss of interest", "fatigue", "sleep changes", "appetite changes", "difficulty concentrating"],
        "causes": ["Brain chemistry", "Genetics", "Life events", "Medical conditions", "Medications"],
        "precautions": ["Regular exercise", "Social support", "Stress management", "Adequate sleep"],
        "medicines": ["Antidepressants", "Mood stabilizers", "Anti-anxiety medications", "Therapy"],
        "severity": "medium",
        "category": "Mental Health",
    },
]

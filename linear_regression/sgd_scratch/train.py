from sgd_course import TrainingLogger, random_parameters, synthetic_linear_data, train

data = synthetic_linear_data(num_samples=30, bias=30, weight=2, low=0, high=100)
init = random_parameters()
logger = TrainingLogger(hparams={'lr': 0.0001, 'num_epochs': 4000})
history = train(data, init.bias, init.weight, learning_rate=0.0001, epochs=4000,
                logger=logger, verbose=True)

logger.summary()
print(history.to_dataframe().iloc[::500])
print('Error of w:', history.final.weight - 2)
print('Error of b:', history.final.bias - 30)
